from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

INTERVAL_ENV = "TELEMETRY_INTERVAL"
ITERATIONS_ENV = "TELEMETRY_ITERATIONS"


@dataclass(frozen=True)
class ProcessHandle:
    """A spawned worker and the configuration it was started with."""

    pid: int
    interval: str
    iterations: str

    def worker_environment(self) -> Dict[str, str]:
        return build_worker_environment(self.interval, self.iterations)


def build_worker_environment(interval: str, iterations: str) -> Dict[str, str]:
    return {INTERVAL_ENV: interval, ITERATIONS_ENV: iterations}


__all__ = ["INTERVAL_ENV", "ITERATIONS_ENV", "ProcessHandle", "build_worker_environment"]
