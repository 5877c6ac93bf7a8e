"""
Centralized logging configuration for the start and stop phases.

Log records go to stdout, where the Actions runner interprets
``::warning::``/``::error::``/``::debug::`` prefixes as annotations:
- DEBUG records become ``::debug::`` lines (only shown with step debugging)
- WARNING records become ``::warning::`` annotations
- ERROR and CRITICAL records become ``::error::`` annotations
- INFO records are printed as-is
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from .actions_host.commands import format_command
from .config import ConfigurationError, env_bool

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"


class ActionsCommandFormatter(logging.Formatter):
    """Render records as workflow commands according to their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return format_command("error", message)
        if record.levelno >= logging.WARNING:
            return format_command("warning", message)
        if record.levelno <= logging.DEBUG:
            return format_command("debug", message)
        return message


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _build_console_handler(stream: TextIO, debug: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(ActionsCommandFormatter("%(message)s"))
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    return console_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("psutil").setLevel(logging.WARNING)


def setup_logging(debug: Optional[bool] = None, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for a phase entry point.

    ``debug`` defaults to the runner's ``RUNNER_DEBUG`` flag.
    """

    with _config_lock:
        root_logger = logging.getLogger()
        if debug is None:
            try:
                debug = bool(env_bool("RUNNER_DEBUG", or_value=False))
            except ConfigurationError:
                debug = False

        _reset_all_handlers(root_logger)

        console_handler = _build_console_handler(stream if stream is not None else sys.stdout, debug)
        root_logger.addHandler(console_handler)

        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        _suppress_noisy_third_parties()


__all__ = ["ActionsCommandFormatter", "setup_logging"]
