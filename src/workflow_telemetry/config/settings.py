"""Settings shared by the start and stop phases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .runtime import env_int, env_seconds, env_str

DEFAULT_ACTION_PATH = "."
DEFAULT_BINARY_NAME = "telemetry"
DEFAULT_PID_FILE = "/tmp/telemetry.pid"
DEFAULT_DATA_FILE = "/tmp/telemetry_data.json"
STATE_KEY = "telemetry-pid"

# Effectively "run until killed"
WORKER_ITERATIONS = "999999"

DEFAULT_POLL_ATTEMPTS = 30
DEFAULT_POLL_INTERVAL_SECONDS = 1.0
DEFAULT_CHART_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True)
class TelemetrySettings:
    """Locations and timing knobs used by the launcher and reaper."""

    action_path: Path = Path(DEFAULT_ACTION_PATH)
    binary_name: str = DEFAULT_BINARY_NAME
    pid_file: Path = Path(DEFAULT_PID_FILE)
    data_file: Path = Path(DEFAULT_DATA_FILE)
    state_key: str = STATE_KEY
    iterations: str = WORKER_ITERATIONS
    poll_attempts: int = DEFAULT_POLL_ATTEMPTS
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS
    chart_timeout: float = DEFAULT_CHART_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.poll_attempts < 1:
            raise ConfigurationError.invalid_value("poll_attempts", self.poll_attempts, "Must be at least 1")
        if self.poll_interval < 0:
            raise ConfigurationError.invalid_value("poll_interval", self.poll_interval, "Must be non-negative")
        if not self.binary_name:
            raise ConfigurationError.missing_value("binary_name")

    @property
    def worker_binary(self) -> Path:
        return self.action_path / self.binary_name

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        """Build settings from the runner environment.

        Raises:
            ConfigurationError: If a numeric override cannot be parsed.
        """
        return cls(
            action_path=Path(env_str("GITHUB_ACTION_PATH", or_value=DEFAULT_ACTION_PATH)),
            binary_name=env_str("TELEMETRY_BINARY_NAME", or_value=DEFAULT_BINARY_NAME),
            pid_file=Path(env_str("TELEMETRY_PID_FILE", or_value=DEFAULT_PID_FILE)),
            data_file=Path(env_str("TELEMETRY_DATA_FILE", or_value=DEFAULT_DATA_FILE)),
            poll_attempts=env_int("TELEMETRY_STOP_POLL_ATTEMPTS", or_value=DEFAULT_POLL_ATTEMPTS),
            poll_interval=env_seconds("TELEMETRY_STOP_POLL_INTERVAL_SECONDS", or_value=DEFAULT_POLL_INTERVAL_SECONDS),
            chart_timeout=env_seconds("TELEMETRY_CHART_TIMEOUT_SECONDS", or_value=DEFAULT_CHART_TIMEOUT_SECONDS),
        )


__all__ = ["STATE_KEY", "TelemetrySettings", "WORKER_ITERATIONS"]
