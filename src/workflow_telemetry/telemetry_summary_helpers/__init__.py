"""Helpers for turning a telemetry artifact into summary statistics."""

from .aggregates import MetricAggregate, aggregate, extract_values
from .artifact_loader import TelemetryArtifact, load_artifact, parse_artifact
from .report_writer import REPORT_HEADING, format_percent, report_items, write_report

__all__ = [
    "MetricAggregate",
    "REPORT_HEADING",
    "TelemetryArtifact",
    "aggregate",
    "extract_values",
    "format_percent",
    "load_artifact",
    "parse_artifact",
    "report_items",
    "write_report",
]
