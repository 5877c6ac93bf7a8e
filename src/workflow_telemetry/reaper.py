"""
Telemetry Reaper

Stops the worker started by the launcher and summarizes what it collected.
Runs as a small sequential state machine:

    IDENTIFY -> SIGNAL -> POLLING -> (EXITED | ESCALATE -> FORCE_KILLED)
             -> SUMMARIZE -> DONE

Every stage reports its own failures as warnings and hands over to the next
stage. Only a missing PID (nothing was launched) or a missing artifact
(nothing was collected) ends the run early, and neither is an error.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import psutil

from .actions_host import SummaryWriter
from .config import TelemetrySettings
from .identity_handoff import IdentityHandoff
from .reaper_helpers import ProcessControl, PsutilProcessControl, generate_charts, wait_for_exit
from .telemetry_summary import SummaryReport, summarize_file

logger = logging.getLogger(__name__)

_SIGNAL_ERRORS = (psutil.NoSuchProcess, psutil.AccessDenied, OSError)


class ReaperStage(enum.Enum):
    IDENTIFY = "identify"
    SIGNAL = "signal"
    POLLING = "polling"
    EXITED = "exited"
    ESCALATE = "escalate"
    FORCE_KILLED = "force_killed"
    SUMMARIZE = "summarize"
    DONE = "done"


@dataclass
class ReaperOutcome:
    """What happened during one stop phase."""

    stages: List[ReaperStage] = field(default_factory=list)
    pid: Optional[int] = None
    probes: int = 0
    escalated: bool = False
    charts_generated: bool = False
    summary: Optional[SummaryReport] = None

    @property
    def final_stage(self) -> Optional[ReaperStage]:
        return self.stages[-1] if self.stages else None


class Reaper:
    """Terminate the supervised worker once, then summarize its artifact."""

    def __init__(
        self,
        settings: TelemetrySettings,
        *,
        handoff: Optional[IdentityHandoff] = None,
        process_control: Optional[ProcessControl] = None,
        sleep: Callable[[float], None] = time.sleep,
        chart_generator: Callable[..., bool] = generate_charts,
        summary_writer: Optional[SummaryWriter] = None,
    ) -> None:
        self.settings = settings
        self.handoff = handoff or IdentityHandoff.default(state_key=settings.state_key, pid_file=settings.pid_file)
        self.process_control = process_control or PsutilProcessControl()
        self._sleep = sleep
        self._chart_generator = chart_generator
        self._summary_writer = summary_writer

    def run(self) -> ReaperOutcome:
        logger.info("Finishing telemetry monitoring...")
        outcome = ReaperOutcome()

        pid = self._identify(outcome)
        if pid is None:
            return outcome

        if self._is_stale(pid):
            logger.warning("PID %s no longer runs %s; not signalling it", pid, self.settings.binary_name)
        else:
            self._signal(outcome, pid)
            if not self._poll(outcome, pid):
                self._escalate(outcome, pid)

        self._summarize(outcome)
        outcome.stages.append(ReaperStage.DONE)
        return outcome

    def _identify(self, outcome: ReaperOutcome) -> Optional[int]:
        outcome.stages.append(ReaperStage.IDENTIFY)
        pid = self.handoff.recover()
        if pid is None:
            logger.warning("Telemetry PID not found")
            return None
        outcome.pid = pid
        logger.info("Stopping telemetry (PID: %s)...", pid)
        return pid

    def _is_stale(self, pid: int) -> bool:
        return self.process_control.matches(pid, self.settings.binary_name) is False

    def _signal(self, outcome: ReaperOutcome, pid: int) -> None:
        outcome.stages.append(ReaperStage.SIGNAL)
        try:
            self.process_control.terminate(pid)
        except _SIGNAL_ERRORS as exc:
            logger.warning("Failed to send SIGTERM to %s: %s", pid, exc)

    def _poll(self, outcome: ReaperOutcome, pid: int) -> bool:
        outcome.stages.append(ReaperStage.POLLING)
        result = wait_for_exit(
            pid,
            exists=self.process_control.exists,
            attempts=self.settings.poll_attempts,
            interval=self.settings.poll_interval,
            sleep=self._sleep,
        )
        outcome.probes = result.probes
        exited = result.exited
        if not exited:
            # Last look at the bound; the worker may have exited during the final sleep
            outcome.probes += 1
            exited = not self.process_control.exists(pid)
        if exited:
            outcome.stages.append(ReaperStage.EXITED)
            logger.info("Telemetry process stopped successfully")
            return True
        logger.warning(
            "Telemetry process %s still running after %d probes at %ss intervals",
            pid,
            result.probes,
            self.settings.poll_interval,
        )
        return False

    def _escalate(self, outcome: ReaperOutcome, pid: int) -> None:
        outcome.stages.append(ReaperStage.ESCALATE)
        outcome.escalated = True
        logger.warning("Force killing telemetry process...")
        try:
            self.process_control.kill(pid)
        except _SIGNAL_ERRORS as exc:
            logger.warning("Failed to send SIGKILL to %s: %s", pid, exc)
            return
        outcome.stages.append(ReaperStage.FORCE_KILLED)
        logger.warning("SIGKILL sent to %s; termination is not re-checked", pid)

    def _summarize(self, outcome: ReaperOutcome) -> None:
        outcome.stages.append(ReaperStage.SUMMARIZE)
        data_file = self.settings.data_file
        if not data_file.exists():
            logger.warning("No telemetry data found")
            return

        outcome.charts_generated = self._chart_generator(
            self.settings.worker_binary, data_file, timeout=self.settings.chart_timeout
        )
        outcome.summary = summarize_file(data_file, self._summary_writer)
        if outcome.summary is not None and outcome.charts_generated:
            logger.info("Charts generated successfully")


def stop_monitoring(settings: TelemetrySettings, **kwargs) -> ReaperOutcome:
    """Run the stop phase with default collaborators."""
    return Reaper(settings, **kwargs).run()


__all__ = ["Reaper", "ReaperOutcome", "ReaperStage", "stop_monitoring"]
