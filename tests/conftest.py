"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from workflow_telemetry.config import TelemetrySettings

_RUNNER_ENV = (
    "GITHUB_ACTION_PATH",
    "GITHUB_STATE",
    "GITHUB_STEP_SUMMARY",
    "INPUT_INTERVAL",
    "RUNNER_DEBUG",
    "STATE_telemetry-pid",
    "TELEMETRY_BINARY_NAME",
    "TELEMETRY_CHART_TIMEOUT_SECONDS",
    "TELEMETRY_DATA_FILE",
    "TELEMETRY_PID_FILE",
    "TELEMETRY_STOP_POLL_ATTEMPTS",
    "TELEMETRY_STOP_POLL_INTERVAL_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the host runner's variables from leaking into tests."""
    for name in _RUNNER_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path) -> TelemetrySettings:
    action_path = tmp_path / "action"
    action_path.mkdir()
    return TelemetrySettings(
        action_path=action_path,
        pid_file=tmp_path / "telemetry.pid",
        data_file=tmp_path / "telemetry_data.json",
        poll_interval=0.0,
    )


@pytest.fixture
def worker_binary(settings: TelemetrySettings):
    binary = settings.worker_binary
    binary.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    binary.chmod(0o644)
    return binary
