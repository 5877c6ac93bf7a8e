"""
Worker PID hand-off between the start and stop phases.

The start and stop phases share no memory, so the PID travels through two
independent channels:

1. the host's run-scoped state (``STATE_telemetry-pid`` in the post step)
2. a plain-text PID file on the runner's filesystem

Writes go to every channel; reads take the first channel that yields a
usable PID. Either channel alone is enough for the stop phase.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from .actions_host import get_state, save_state
from .errors import HostStateError, IdentityPersistError

logger = logging.getLogger(__name__)

# Largest value a C int (pid_t) can hold
_MAX_PID = 2**31 - 1


def parse_pid(raw: Optional[str]) -> Optional[int]:
    """Return a positive PID parsed from *raw*, or ``None`` when unusable."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        pid = int(text)
    except ValueError:
        return None
    if pid <= 0 or pid > _MAX_PID:
        return None
    return pid


class IdentityChannel(Protocol):
    name: str

    def write(self, pid: int) -> None: ...

    def read(self) -> Optional[str]: ...


class PidFileChannel:
    """Decimal PID stored in a well-known file."""

    name = "pid-file"

    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, pid: int) -> None:
        self.path.write_text(str(pid), encoding="utf-8")

    def read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None


class HostStateChannel:
    """PID mirrored into the host pipeline's run-scoped state store."""

    name = "host-state"

    def __init__(
        self,
        key: str,
        *,
        saver: Callable[[str, object], None] = save_state,
        loader: Callable[[str], str] = get_state,
    ) -> None:
        self.key = key
        self._saver = saver
        self._loader = loader

    def write(self, pid: int) -> None:
        self._saver(self.key, pid)

    def read(self) -> Optional[str]:
        value = self._loader(self.key)
        return value or None


class IdentityHandoff:
    """Best-effort redundant PID record with a fixed read priority."""

    def __init__(self, channels: Sequence[IdentityChannel]) -> None:
        if not channels:
            raise ValueError("IdentityHandoff requires at least one channel")
        self.channels = list(channels)

    @classmethod
    def default(cls, *, state_key: str, pid_file: Path) -> "IdentityHandoff":
        return cls([HostStateChannel(state_key), PidFileChannel(pid_file)])

    def persist(self, pid: int) -> List[str]:
        """Write *pid* to every channel and return the names that accepted it.

        Raises:
            IdentityPersistError: If every channel failed.
        """
        written: List[str] = []
        failures: List[str] = []
        for channel in self.channels:
            try:
                channel.write(pid)
            except (OSError, HostStateError) as exc:
                logger.warning("Failed to record telemetry PID via %s: %s", channel.name, exc)
                failures.append(f"{channel.name}: {exc}")
                continue
            written.append(channel.name)
            logger.debug("Recorded telemetry PID %s via %s", pid, channel.name)

        if not written:
            raise IdentityPersistError(pid, failures)
        return written

    def recover(self) -> Optional[int]:
        """Return the PID from the highest-priority channel that holds one."""
        for channel in self.channels:
            try:
                raw = channel.read()
            except UnicodeDecodeError as exc:
                logger.warning("Ignoring malformed telemetry PID from %s: %s", channel.name, exc)
                continue
            except OSError as exc:
                logger.warning("Failed to read telemetry PID via %s: %s", channel.name, exc)
                continue
            if raw is None:
                logger.debug("No telemetry PID recorded via %s", channel.name)
                continue
            pid = parse_pid(raw)
            if pid is None:
                logger.warning("Ignoring malformed telemetry PID %r from %s", raw, channel.name)
                continue
            logger.debug("Recovered telemetry PID %s via %s", pid, channel.name)
            return pid
        return None


__all__ = [
    "HostStateChannel",
    "IdentityChannel",
    "IdentityHandoff",
    "PidFileChannel",
    "parse_pid",
]
