"""Adapters for the GitHub Actions runner's file and command protocols."""

from .commands import issue_command, set_failed
from .inputs import get_input
from .state import get_state, save_state
from .summary import SummaryWriter

__all__ = [
    "SummaryWriter",
    "get_input",
    "get_state",
    "issue_command",
    "save_state",
    "set_failed",
]
