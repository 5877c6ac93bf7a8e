import pytest

from workflow_telemetry.launcher_helpers import DEFAULT_INTERVAL, resolve_interval


@pytest.mark.parametrize("raw", ["1", "2", "5", "60", "3600"])
def test_resolve_interval_passes_positive_integers_through(raw):
    assert resolve_interval(raw) == raw


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_resolve_interval_defaults_when_missing(raw):
    assert resolve_interval(raw) == DEFAULT_INTERVAL == "2"


@pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-3"])
def test_resolve_interval_defaults_when_invalid(raw, caplog):
    with caplog.at_level("WARNING"):
        assert resolve_interval(raw) == DEFAULT_INTERVAL
    assert "interval" in caplog.text


def test_resolve_interval_strips_whitespace():
    assert resolve_interval(" 10 ") == "10"
