import pytest

from workflow_telemetry.errors import HostStateError, IdentityPersistError
from workflow_telemetry.identity_handoff import HostStateChannel, IdentityHandoff, PidFileChannel, parse_pid


class MemoryStateStore:
    """Stands in for the runner's save-state/get-state round trip."""

    def __init__(self, *, fail_writes=False):
        self.values = {}
        self.fail_writes = fail_writes

    def save(self, name, value):
        if self.fail_writes:
            raise HostStateError("state file unavailable")
        self.values[name] = str(value)

    def load(self, name):
        return self.values.get(name, "")


def _state_channel(store):
    return HostStateChannel("telemetry-pid", saver=store.save, loader=store.load)


@pytest.mark.parametrize("raw,expected", [("1234", 1234), (" 77\n", 77), ("", None), ("abc", None), ("0", None), ("-5", None), (None, None), ("2147483647", 2147483647), ("2147483648", None), ("99999999999999999999", None)])
def test_parse_pid(raw, expected):
    assert parse_pid(raw) == expected


@pytest.mark.parametrize("pid", [1, 4321, 4_194_304])
def test_round_trip_through_pid_file_alone(tmp_path, pid):
    handoff = IdentityHandoff([PidFileChannel(tmp_path / "telemetry.pid")])

    assert handoff.persist(pid) == ["pid-file"]
    assert handoff.recover() == pid
    assert (tmp_path / "telemetry.pid").read_text() == str(pid)


@pytest.mark.parametrize("pid", [1, 4321, 4_194_304])
def test_round_trip_through_host_state_alone(pid):
    handoff = IdentityHandoff([_state_channel(MemoryStateStore())])

    assert handoff.persist(pid) == ["host-state"]
    assert handoff.recover() == pid


def test_persist_survives_host_state_failure(tmp_path, caplog):
    store = MemoryStateStore(fail_writes=True)
    handoff = IdentityHandoff([_state_channel(store), PidFileChannel(tmp_path / "telemetry.pid")])

    with caplog.at_level("WARNING"):
        written = handoff.persist(99)

    assert written == ["pid-file"]
    assert "host-state" in caplog.text
    assert handoff.recover() == 99


def test_persist_survives_pid_file_failure(tmp_path):
    store = MemoryStateStore()
    handoff = IdentityHandoff([_state_channel(store), PidFileChannel(tmp_path / "missing-dir" / "telemetry.pid")])

    assert handoff.persist(55) == ["host-state"]
    assert handoff.recover() == 55


def test_persist_raises_when_every_channel_fails(tmp_path):
    handoff = IdentityHandoff(
        [_state_channel(MemoryStateStore(fail_writes=True)), PidFileChannel(tmp_path / "missing-dir" / "telemetry.pid")]
    )

    with pytest.raises(IdentityPersistError) as excinfo:
        handoff.persist(12)

    assert excinfo.value.pid == 12
    assert len(excinfo.value.failures) == 2


def test_recover_prefers_host_state(tmp_path):
    store = MemoryStateStore()
    store.values["telemetry-pid"] = "111"
    pid_file = tmp_path / "telemetry.pid"
    pid_file.write_text("222")
    handoff = IdentityHandoff([_state_channel(store), PidFileChannel(pid_file)])

    assert handoff.recover() == 111


def test_recover_falls_back_to_pid_file(tmp_path):
    pid_file = tmp_path / "telemetry.pid"
    pid_file.write_text("222\n")
    handoff = IdentityHandoff([_state_channel(MemoryStateStore()), PidFileChannel(pid_file)])

    assert handoff.recover() == 222


def test_recover_skips_malformed_channel(tmp_path, caplog):
    store = MemoryStateStore()
    store.values["telemetry-pid"] = "garbage"
    pid_file = tmp_path / "telemetry.pid"
    pid_file.write_text("333")
    handoff = IdentityHandoff([_state_channel(store), PidFileChannel(pid_file)])

    with caplog.at_level("WARNING"):
        assert handoff.recover() == 333
    assert "malformed" in caplog.text


def test_recover_returns_none_when_nothing_recorded(tmp_path):
    handoff = IdentityHandoff([_state_channel(MemoryStateStore()), PidFileChannel(tmp_path / "telemetry.pid")])

    assert handoff.recover() is None


def test_default_host_state_channel_reads_runner_state(monkeypatch, tmp_path):
    monkeypatch.setenv("STATE_telemetry-pid", "808")
    handoff = IdentityHandoff.default(state_key="telemetry-pid", pid_file=tmp_path / "telemetry.pid")

    assert handoff.recover() == 808


def test_default_host_state_channel_writes_state_file(monkeypatch, tmp_path):
    state_file = tmp_path / "state"
    monkeypatch.setenv("GITHUB_STATE", str(state_file))
    handoff = IdentityHandoff.default(state_key="telemetry-pid", pid_file=tmp_path / "telemetry.pid")

    handoff.persist(909)

    lines = state_file.read_text().splitlines()
    assert lines[0].startswith("telemetry-pid<<ghadelimiter_")
    assert lines[1] == "909"
    assert (tmp_path / "telemetry.pid").read_text() == "909"


def test_handoff_requires_channels():
    with pytest.raises(ValueError):
        IdentityHandoff([])


def test_undecodable_pid_file_falls_through_to_host_state(tmp_path, caplog):
    pid_file = tmp_path / "telemetry.pid"
    pid_file.write_bytes(b"\xff\xfe")
    store = MemoryStateStore()
    store.save("telemetry-pid", 808)
    handoff = IdentityHandoff([PidFileChannel(pid_file), _state_channel(store)])

    with caplog.at_level("WARNING"):
        assert handoff.recover() == 808

    assert "malformed" in caplog.text
    assert "pid-file" in caplog.text


def test_undecodable_pid_file_alone_recovers_nothing(tmp_path):
    pid_file = tmp_path / "telemetry.pid"
    pid_file.write_bytes(b"\xff\xfe")

    assert IdentityHandoff([PidFileChannel(pid_file)]).recover() is None
