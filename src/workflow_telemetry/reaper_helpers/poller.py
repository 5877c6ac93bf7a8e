"""Bounded wait for a process to disappear."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollResult:
    exited: bool
    probes: int


def wait_for_exit(
    pid: int,
    *,
    exists: Callable[[int], bool],
    attempts: int,
    interval: float,
    sleep: Callable[[float], None],
) -> PollResult:
    """Probe *pid* up to *attempts* times, sleeping *interval* after each live probe."""
    for attempt in range(1, attempts + 1):
        if not exists(pid):
            return PollResult(exited=True, probes=attempt)
        logger.debug("Telemetry process %s still running (probe %d/%d)", pid, attempt, attempts)
        sleep(interval)
    return PollResult(exited=False, probes=attempts)


__all__ = ["PollResult", "wait_for_exit"]
