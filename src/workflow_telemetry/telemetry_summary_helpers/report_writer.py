"""Render a summary report into the job summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..actions_host import SummaryWriter

if TYPE_CHECKING:
    from ..telemetry_summary import SummaryReport

REPORT_HEADING = "Workflow Telemetry Report"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def _format_duration(seconds: float) -> str:
    minutes, secs = divmod(int(round(seconds)), 60)
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def report_items(report: "SummaryReport") -> List[str]:
    items = [f"**Data Points**: {report.data_points}"]
    if report.cpu is not None:
        items.append(f"**CPU Average**: {format_percent(report.cpu.average)}")
        items.append(f"**CPU Peak**: {format_percent(report.cpu.peak)}")
    if report.memory is not None:
        items.append(f"**Memory Average**: {format_percent(report.memory.average)}")
        items.append(f"**Memory Peak**: {format_percent(report.memory.peak)}")
    if report.memory_peak_mb is not None:
        items.append(f"**Memory Peak (MB)**: {report.memory_peak_mb:.0f}")
    if report.duration_seconds is not None:
        items.append(f"**Duration**: {_format_duration(report.duration_seconds)}")
    return items


def write_report(report: "SummaryReport", writer: SummaryWriter) -> str:
    """Append the report to *writer* and flush it; returns the markdown written."""
    return writer.add_heading(REPORT_HEADING).add_list(report_items(report)).write()
