"""Helpers for stopping the telemetry worker."""

from .chart_renderer import generate_charts
from .poller import PollResult, wait_for_exit
from .process_control import ProcessControl, PsutilProcessControl

__all__ = ["PollResult", "ProcessControl", "PsutilProcessControl", "generate_charts", "wait_for_exit"]
