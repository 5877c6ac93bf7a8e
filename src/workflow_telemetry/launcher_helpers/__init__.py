"""Helpers for bringing the telemetry worker up."""

from .executable import ensure_executable
from .interval import DEFAULT_INTERVAL, resolve_interval
from .spawner import spawn_detached

__all__ = ["DEFAULT_INTERVAL", "ensure_executable", "resolve_interval", "spawn_detached"]
