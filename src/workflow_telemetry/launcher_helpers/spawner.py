"""Detached worker spawning."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional

from ..errors import WorkerSpawnError

logger = logging.getLogger(__name__)


def spawn_detached(path: Path, env_overrides: Mapping[str, str], *, base_env: Optional[Mapping[str, str]] = None) -> int:
    """Start *path* in its own session with no inherited standard streams.

    The child is not waited on; it keeps running after this process exits.

    Raises:
        WorkerSpawnError: If the operating system refuses to start the worker.
    """
    env = dict(base_env if base_env is not None else os.environ)
    env.update(env_overrides)
    try:
        proc = subprocess.Popen(
            [str(path)],
            env=env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            start_new_session=True,  # Detach from parent
        )
    except OSError as exc:
        raise WorkerSpawnError(path, str(exc)) from exc

    # Never waited on; a set returncode keeps the collected handle from
    # reporting the still-running child as leaked.
    proc.returncode = 0
    logger.debug("Spawned %s as PID %s", path, proc.pid)
    return proc.pid
