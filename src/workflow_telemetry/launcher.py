"""
Telemetry Launcher

Starts the telemetry worker as a detached background process and records its
PID so the post step can find it again.

Usage:
    from workflow_telemetry.launcher import start_monitoring

    handle = start_monitoring(TelemetrySettings.from_env(), interval="5")
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

import psutil

from .config import TelemetrySettings
from .errors import IdentityPersistError
from .identity_handoff import IdentityHandoff
from .launcher_helpers import ensure_executable, resolve_interval, spawn_detached
from .process_handle import ProcessHandle, build_worker_environment
from .reaper_helpers import PsutilProcessControl

logger = logging.getLogger(__name__)

Spawner = Callable[..., int]


def _discard_unrecorded_worker(pid: int) -> None:
    """Stop a worker whose PID the post step would never find."""
    try:
        PsutilProcessControl().terminate(pid)
    except (psutil.NoSuchProcess, psutil.AccessDenied, OSError) as exc:
        logger.warning("Could not stop unrecorded telemetry worker %s: %s", pid, exc)
        return
    logger.warning("Stopped telemetry worker %s because its PID could not be recorded", pid)


def start_monitoring(
    settings: TelemetrySettings,
    interval: Optional[str] = None,
    *,
    handoff: Optional[IdentityHandoff] = None,
    spawner: Spawner = spawn_detached,
    base_env: Optional[Mapping[str, str]] = None,
) -> ProcessHandle:
    """Launch the worker and persist its PID through every hand-off channel.

    Args:
        settings: Worker location and hand-off locations.
        interval: Raw sampling interval input; falls back to the default when
            empty or not a positive integer.
        handoff: PID hand-off; defaults to host state plus the PID file.
        spawner: Process starter, replaced in tests.
        base_env: Environment the worker inherits; defaults to ``os.environ``.

    Raises:
        LauncherError: If the worker is missing, cannot be made executable,
            cannot be started, or its PID cannot be recorded anywhere.
    """
    logger.info("Starting telemetry monitoring...")
    effective_interval = resolve_interval(interval)
    binary = settings.worker_binary

    ensure_executable(binary)

    env_overrides = build_worker_environment(effective_interval, settings.iterations)
    pid = spawner(binary, env_overrides, base_env=base_env)
    handle = ProcessHandle(pid=pid, interval=effective_interval, iterations=settings.iterations)

    if handoff is None:
        handoff = IdentityHandoff.default(state_key=settings.state_key, pid_file=settings.pid_file)
    try:
        handoff.persist(handle.pid)
    except IdentityPersistError:
        _discard_unrecorded_worker(handle.pid)
        raise

    logger.info("Telemetry monitoring started (PID: %s, interval: %ss)", handle.pid, handle.interval)
    return handle


__all__ = ["start_monitoring"]
