"""
Summary statistics for a finished telemetry run.

CPU and memory are aggregated independently: a run with memory samples but
no CPU samples still reports memory figures, and arrays of different lengths
are averaged over their own sample counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .actions_host import SummaryWriter
from .errors import ArtifactError
from .telemetry_summary_helpers import (
    MetricAggregate,
    TelemetryArtifact,
    aggregate,
    extract_values,
    load_artifact,
    write_report,
)

logger = logging.getLogger(__name__)

# Worker timestamps are milliseconds since the epoch
_TIMESTAMP_UNITS_PER_SECOND = 1000.0


@dataclass(frozen=True)
class SummaryReport:
    cpu: Optional[MetricAggregate]
    memory: Optional[MetricAggregate]
    memory_peak_mb: Optional[float] = None
    duration_seconds: Optional[float] = None

    @property
    def data_points(self) -> int:
        return self.cpu.count if self.cpu is not None else 0

    @property
    def has_data(self) -> bool:
        return self.cpu is not None or self.memory is not None


def _duration_seconds(artifact: TelemetryArtifact) -> Optional[float]:
    stamps: List[float] = extract_values(artifact.cpu, "time") + extract_values(artifact.memory, "time")
    if len(stamps) < 2:
        return None
    return (max(stamps) - min(stamps)) / _TIMESTAMP_UNITS_PER_SECOND


def summarize_artifact(artifact: TelemetryArtifact) -> SummaryReport:
    """Compute count/average/peak for CPU ``total_load`` and memory ``usage_percent``."""
    used_mb = extract_values(artifact.memory, "used_mb")
    return SummaryReport(
        cpu=aggregate(extract_values(artifact.cpu, "total_load")),
        memory=aggregate(extract_values(artifact.memory, "usage_percent")),
        memory_peak_mb=max(used_mb) if used_mb else None,
        duration_seconds=_duration_seconds(artifact),
    )


def summarize_file(path: Path, writer: Optional[SummaryWriter] = None) -> Optional[SummaryReport]:
    """Summarize the artifact at *path* and write the report.

    Returns ``None`` (after a warning) when there is nothing to report. Never
    raises for a missing, malformed, or empty artifact.
    """
    try:
        artifact = load_artifact(path)
    except FileNotFoundError:
        logger.warning("No telemetry data found")
        return None
    except ArtifactError as exc:
        logger.warning("%s", exc)
        return None

    report = summarize_artifact(artifact)
    if not report.has_data:
        logger.warning("Telemetry data at %s contains no samples", path)
        return None

    if writer is None:
        writer = SummaryWriter()
    try:
        write_report(report, writer)
    except OSError as exc:
        logger.warning("Failed to write telemetry summary: %s", exc)
    return report


__all__ = ["SummaryReport", "summarize_artifact", "summarize_file"]
