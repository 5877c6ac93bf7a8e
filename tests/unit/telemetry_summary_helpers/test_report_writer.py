from workflow_telemetry.actions_host import SummaryWriter
from workflow_telemetry.telemetry_summary import SummaryReport
from workflow_telemetry.telemetry_summary_helpers import MetricAggregate, format_percent, report_items, write_report


def test_format_percent_rounds_to_two_decimals():
    assert format_percent(20) == "20.00%"
    assert format_percent(33.3333) == "33.33%"


def test_report_items_lists_core_metrics():
    report = SummaryReport(
        cpu=MetricAggregate(count=2, average=20.0, peak=30.0),
        memory=MetricAggregate(count=2, average=50.0, peak=60.0),
    )

    assert report_items(report) == [
        "**Data Points**: 2",
        "**CPU Average**: 20.00%",
        "**CPU Peak**: 30.00%",
        "**Memory Average**: 50.00%",
        "**Memory Peak**: 60.00%",
    ]


def test_report_items_includes_optional_extras():
    report = SummaryReport(
        cpu=MetricAggregate(count=3, average=1.0, peak=2.0),
        memory=None,
        memory_peak_mb=2048.4,
        duration_seconds=125.0,
    )

    items = report_items(report)

    assert "**Memory Average**: 50.00%" not in items
    assert "**Memory Peak (MB)**: 2048" in items
    assert "**Duration**: 2m 5s" in items


def test_write_report_appends_markdown(tmp_path):
    summary_path = tmp_path / "summary.md"
    summary_path.write_text("existing\n", encoding="utf-8")
    report = SummaryReport(cpu=MetricAggregate(count=1, average=5.0, peak=5.0), memory=None)

    write_report(report, SummaryWriter(summary_path))

    content = summary_path.read_text(encoding="utf-8")
    assert content.startswith("existing\n# Workflow Telemetry Report\n")
    assert "- **CPU Peak**: 5.00%" in content
