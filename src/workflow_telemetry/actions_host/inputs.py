"""Action input lookup."""

from __future__ import annotations

from ..config import env_str


def input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, *, required: bool = False) -> str:
    """Return the trimmed value of an action input, or ``""`` when unset."""
    value = env_str(input_env_name(name), or_value="", required=required)
    return value if value is not None else ""


__all__ = ["get_input", "input_env_name"]
