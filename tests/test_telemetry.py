from fedramp_scraper.error_codes import ErrorCode
from fedramp_scraper.telemetry import RunTelemetry


def test_run_telemetry_counts_outcomes() -> None:
    telemetry = RunTelemetry(total=3)
    telemetry.add("A", "success")
    telemetry.add("B", "failed", ErrorCode.NAVIGATION)
    telemetry.add("C", "failed", ErrorCode.NO_PARAGRAPHS)

    summary = telemetry.finalize({"output": "out.csv"})

    assert summary["total"] == 3
    assert summary["processed"] == 3
    assert summary["succeeded"] == 1
    assert summary["failed"] == 2
    assert summary["fail_reasons"] == {
        ErrorCode.NAVIGATION: 1,
        ErrorCode.NO_PARAGRAPHS: 1,
    }
    assert summary["output"] == "out.csv"
    assert summary["ended_at"] >= summary["started_at"]
