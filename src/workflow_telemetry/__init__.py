"""Background telemetry worker supervision for CI workflows."""

from .errors import LauncherError, TelemetryError
from .launcher import start_monitoring
from .process_handle import ProcessHandle
from .reaper import Reaper, ReaperOutcome, ReaperStage, stop_monitoring
from .telemetry_summary import SummaryReport, summarize_artifact, summarize_file

__all__ = [
    "LauncherError",
    "ProcessHandle",
    "Reaper",
    "ReaperOutcome",
    "ReaperStage",
    "SummaryReport",
    "TelemetryError",
    "start_monitoring",
    "stop_monitoring",
    "summarize_artifact",
    "summarize_file",
]
