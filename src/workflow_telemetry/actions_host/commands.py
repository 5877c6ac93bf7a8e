"""Workflow command emission (``::name key=value::message``)."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, TextIO


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str, properties: Optional[Mapping[str, str]] = None) -> str:
    """Render a workflow command line without the trailing newline."""
    rendered = f"::{command}"
    if properties:
        joined = ",".join(f"{key}={escape_property(str(value))}" for key, value in properties.items() if value)
        if joined:
            rendered += f" {joined}"
    return f"{rendered}::{escape_data(message)}"


def issue_command(
    command: str,
    message: str,
    properties: Optional[Mapping[str, str]] = None,
    *,
    stream: Optional[TextIO] = None,
) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(format_command(command, message, properties) + "\n")
    target.flush()


def set_failed(message: str, *, stream: Optional[TextIO] = None) -> int:
    """Report a step failure and return the exit code the caller should use."""
    issue_command("error", message, stream=stream)
    return 1


__all__ = ["escape_data", "escape_property", "format_command", "issue_command", "set_failed"]
