"""Make sure the worker binary can be executed."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import WorkerExecutableMissingError, WorkerPermissionError

logger = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def ensure_executable(path: Path) -> None:
    """Add execute permission to *path* (``chmod +x``).

    Raises:
        WorkerExecutableMissingError: If *path* does not exist.
        WorkerPermissionError: If the mode cannot be changed and the file is not
            already executable.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError as exc:
        raise WorkerExecutableMissingError(path) from exc

    if not stat.S_ISREG(mode):
        raise WorkerPermissionError(path, "not a regular file")

    try:
        path.chmod(mode | _EXECUTE_BITS)
    except OSError as exc:
        if os.access(path, os.X_OK):
            logger.warning("Could not chmod %s (%s); it is already executable, continuing", path, exc)
            return
        raise WorkerPermissionError(path, str(exc)) from exc
    logger.debug("Marked %s executable", path)
