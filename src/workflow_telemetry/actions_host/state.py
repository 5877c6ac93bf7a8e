"""Run-scoped state shared between an action's ``main`` and ``post`` steps.

The runner exposes values saved during ``main`` to ``post`` as
``STATE_<name>`` environment variables. Values are saved by appending a
heredoc-style record to the file named by ``GITHUB_STATE``; older runners
only understand the ``save-state`` workflow command.
"""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path
from typing import Optional, TextIO

from ..errors import HostStateError
from .commands import issue_command

logger = logging.getLogger(__name__)

STATE_FILE_ENV = "GITHUB_STATE"


def _state_record(name: str, value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise HostStateError(f"Unexpected delimiter collision while saving state {name!r}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def save_state(name: str, value: object, *, stream: Optional[TextIO] = None) -> None:
    """Persist *value* under *name* for the post step.

    Raises:
        HostStateError: If the state file cannot be appended to.
    """
    text = str(value)
    state_file = os.getenv(STATE_FILE_ENV)
    if not state_file:
        logger.debug("%s not set; falling back to save-state command", STATE_FILE_ENV)
        issue_command("save-state", text, {"name": name}, stream=stream)
        return

    record = _state_record(name, text)
    try:
        with Path(state_file).open("a", encoding="utf-8") as handle:
            handle.write(record)
    except OSError as exc:
        raise HostStateError(f"Failed to append state {name!r} to {state_file}") from exc


def get_state(name: str) -> str:
    """Return the state saved under *name*, or ``""`` when absent."""
    value = os.getenv(f"STATE_{name}")
    if value is None:
        return ""
    return value


__all__ = ["STATE_FILE_ENV", "get_state", "save_state"]
