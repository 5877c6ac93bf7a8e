"""Environment-backed configuration for the telemetry supervisor."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_int, env_seconds, env_str
from .settings import TelemetrySettings

__all__ = [
    "ConfigurationError",
    "TelemetrySettings",
    "env_bool",
    "env_float",
    "env_int",
    "env_seconds",
    "env_str",
]
