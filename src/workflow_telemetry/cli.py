"""Command line entry points for the action's ``main`` and ``post`` steps."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .actions_host import get_input, set_failed
from .config import ConfigurationError, TelemetrySettings
from .errors import LauncherError, TelemetryError
from .launcher import start_monitoring
from .logging_config import setup_logging
from .reaper import stop_monitoring

logger = logging.getLogger(__name__)


def run_start(interval: Optional[str] = None) -> int:
    """Start phase; any failure fails the step."""
    try:
        settings = TelemetrySettings.from_env()
        start_monitoring(settings, interval if interval is not None else get_input("interval"))
    except (LauncherError, ConfigurationError) as exc:
        return set_failed(f"Action failed: {exc}")
    return 0


def run_stop() -> int:
    """Stop phase; problems are reported as warnings and never fail the step."""
    try:
        settings = TelemetrySettings.from_env()
    except ConfigurationError as exc:
        logger.warning("Invalid telemetry configuration (%s); using defaults", exc)
        settings = TelemetrySettings()
    try:
        stop_monitoring(settings)
    except (TelemetryError, OSError) as exc:
        logger.warning("Post action failed: %s", exc)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="workflow-telemetry", description="Supervise the workflow telemetry worker")
    subparsers = parser.add_subparsers(dest="command", required=True)

    start = subparsers.add_parser("start", help="Launch the telemetry worker in the background")
    start.add_argument(
        "--interval",
        default=None,
        help="Sampling interval in seconds (defaults to the 'interval' action input)",
    )
    subparsers.add_parser("stop", help="Stop the telemetry worker and summarize its data")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    if args.command == "start":
        return run_start(args.interval)
    return run_stop()


if __name__ == "__main__":
    sys.exit(main())
