from __future__ import annotations

import csv
from pathlib import Path

import pytest

from fedramp_scraper import config
from fedramp_scraper.csv_writer import ResultWriter
from fedramp_scraper.records import AuthorizationRecord


def _read_rows(path: Path) -> list[list[str]]:
    with path.open(newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


def test_header_written_on_open(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"

    with ResultWriter(output):
        assert _read_rows(output) == [list(config.OUTPUT_HEADER)]


def test_record_row_renders_absent_fields_empty(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    record = AuthorizationRecord(id="FR1", fedramp_ready="01/02/2020", independent_assessor="Acme, Inc.")

    with ResultWriter(output) as writer:
        writer.write_record(record)

    rows = _read_rows(output)
    assert rows[1] == ["FR1", "01/02/2020", "", "", "", "", "Acme, Inc."]
    assert "None" not in rows[1]


def test_navigation_error_row(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"

    with ResultWriter(output) as writer:
        writer.write_navigation_error("ABC123")

    assert _read_rows(output)[1] == ["ABC123", "Error - Navigation failed", "", "", "", "", ""]


def test_error_row_prefixes_message(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"

    with ResultWriter(output) as writer:
        writer.write_error("FR9", "No paragraphs found")

    assert _read_rows(output)[1] == ["FR9", "Error: No paragraphs found", "", "", "", "", ""]


def test_every_row_is_durable_before_close(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    writer = ResultWriter(output)

    writer.write_record(AuthorizationRecord(id="A"))
    assert len(_read_rows(output)) == 2
    writer.write_navigation_error("B")
    assert len(_read_rows(output)) == 3
    writer.write_error("C", "boom")
    rows = _read_rows(output)
    assert len(rows) == 4
    assert all(len(row) == 7 for row in rows)
    assert writer.rows_written == 3

    writer.close()
    writer.close()
    assert writer.closed


def test_output_truncates_existing_file(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    output.write_text("stale,data\n" * 5, encoding="utf-8")

    with ResultWriter(output):
        pass

    assert _read_rows(output) == [list(config.OUTPUT_HEADER)]


def test_unwritable_output_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        ResultWriter(tmp_path / "missing-dir" / "out.csv")
