"""Signal delivery and liveness probing by PID."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence

import psutil

logger = logging.getLogger(__name__)


class ProcessControl(Protocol):
    def exists(self, pid: int) -> bool: ...

    def terminate(self, pid: int) -> None: ...

    def kill(self, pid: int) -> None: ...

    def matches(self, pid: int, binary_name: str) -> Optional[bool]: ...


class PsutilProcessControl:
    """psutil-backed process control.

    ``terminate``/``kill`` raise ``psutil.NoSuchProcess``,
    ``psutil.AccessDenied`` or ``OSError``; callers decide how to report them.
    """

    def exists(self, pid: int) -> bool:
        """Signal-0 style existence check; zombies count as exited."""
        if not psutil.pid_exists(pid):
            return False
        try:
            return psutil.Process(pid).status() != psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return False
        except psutil.AccessDenied:
            # Exists but belongs to someone else
            return True

    def terminate(self, pid: int) -> None:
        psutil.Process(pid).terminate()

    def kill(self, pid: int) -> None:
        psutil.Process(pid).kill()

    def matches(self, pid: int, binary_name: str) -> Optional[bool]:
        """Whether *pid* still runs *binary_name*; ``None`` when it cannot be inspected."""
        try:
            proc = psutil.Process(pid)
            cmdline: Sequence[str] = proc.cmdline()
            name = proc.name()
        except psutil.NoSuchProcess:
            return None
        except psutil.AccessDenied:
            logger.debug("Access denied inspecting process %s", pid)
            return None
        if name == binary_name:
            return True
        if cmdline:
            return Path(cmdline[0]).name == binary_name
        return None


__all__ = ["ProcessControl", "PsutilProcessControl"]
