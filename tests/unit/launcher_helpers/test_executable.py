import os
import stat

import pytest

from workflow_telemetry.errors import WorkerExecutableMissingError, WorkerPermissionError
from workflow_telemetry.launcher_helpers import ensure_executable


def test_ensure_executable_adds_execute_bits(worker_binary):
    ensure_executable(worker_binary)

    mode = worker_binary.stat().st_mode
    assert mode & stat.S_IXUSR
    assert os.access(worker_binary, os.X_OK)


def test_ensure_executable_missing_binary_raises(tmp_path):
    with pytest.raises(WorkerExecutableMissingError) as excinfo:
        ensure_executable(tmp_path / "telemetry")

    assert excinfo.value.path == tmp_path / "telemetry"


def test_ensure_executable_rejects_directory(tmp_path):
    with pytest.raises(WorkerPermissionError):
        ensure_executable(tmp_path)


def test_ensure_executable_tolerates_chmod_failure_when_already_executable(worker_binary, monkeypatch, caplog):
    worker_binary.chmod(0o755)

    def deny(self, mode):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(type(worker_binary), "chmod", deny)

    with caplog.at_level("WARNING"):
        ensure_executable(worker_binary)

    assert "already executable" in caplog.text


def test_ensure_executable_chmod_failure_is_fatal_when_not_executable(worker_binary, monkeypatch):
    def deny(self, mode):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(type(worker_binary), "chmod", deny)
    monkeypatch.setattr(os, "access", lambda path, mode: False)

    with pytest.raises(WorkerPermissionError):
        ensure_executable(worker_binary)
