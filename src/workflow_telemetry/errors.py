"""Error types raised by the telemetry supervisor."""

from __future__ import annotations

from pathlib import Path


class TelemetryError(RuntimeError):
    """Base class for supervisor failures."""


class LauncherError(TelemetryError):
    """Raised when the start phase cannot bring the worker up."""


class WorkerExecutableMissingError(LauncherError):
    """Raised when the worker binary does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Telemetry worker not found at {path}")
        self.path = path


class WorkerPermissionError(LauncherError):
    """Raised when the worker binary cannot be made executable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Telemetry worker {path} is not executable: {reason}")
        self.path = path
        self.reason = reason


class WorkerSpawnError(LauncherError):
    """Raised when the operating system refuses to start the worker."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to start telemetry worker {path}: {reason}")
        self.path = path
        self.reason = reason


class IdentityPersistError(LauncherError):
    """Raised when no hand-off channel accepted the worker PID."""

    def __init__(self, pid: int, failures: list[str]) -> None:
        joined = "; ".join(failures)
        super().__init__(f"Could not persist telemetry PID {pid} to any channel ({joined})")
        self.pid = pid
        self.failures = failures


class HostStateError(TelemetryError):
    """Raised when the host pipeline's state store cannot be written."""


class ArtifactError(TelemetryError):
    """Raised when the telemetry artifact cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Telemetry data {path} is unreadable: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "ArtifactError",
    "HostStateError",
    "IdentityPersistError",
    "LauncherError",
    "TelemetryError",
    "WorkerExecutableMissingError",
    "WorkerPermissionError",
    "WorkerSpawnError",
]
