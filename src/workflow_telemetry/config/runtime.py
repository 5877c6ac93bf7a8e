from __future__ import annotations

"""Runtime helpers for reading runner environment variables."""


import os
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})


def env_str(name: str, or_value: Optional[str] = None, *, required: bool = False) -> Optional[str]:
    """Return the stripped value of *name*; blank counts as unset."""

    value = (os.getenv(name) or "").strip()
    if value:
        return value
    if required:
        raise ConfigurationError.missing_value(name, "required environment variable")
    return or_value


def _env_cast(name: str, or_value: Optional[T], cast: Callable[[str], T], kind: str) -> Optional[T]:
    raw = env_str(name)
    if raw is None:
        return or_value
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, f"Expected {kind}") from exc


def _to_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(raw)


def env_int(name: str, or_value: Optional[int] = None) -> Optional[int]:
    return _env_cast(name, or_value, int, "an integer")


def env_float(name: str, or_value: Optional[float] = None) -> Optional[float]:
    return _env_cast(name, or_value, float, "a number")


def env_bool(name: str, or_value: Optional[bool] = None) -> Optional[bool]:
    return _env_cast(name, or_value, _to_bool, f"one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def env_seconds(name: str, or_value: Optional[float] = None) -> Optional[float]:
    """Fetch a non-negative duration stored as (possibly fractional) seconds."""

    value = env_float(name, or_value=or_value)
    if value is not None and value < 0:
        raise ConfigurationError.invalid_value(name, value, "Durations must be non-negative")
    return value
