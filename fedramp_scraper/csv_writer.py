"""CSV result writer with per-row durability.

Every row is flushed and fsync'd before the next product is processed, so an
interrupted run leaves a readable file holding the header and every row
completed so far.
"""
from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from . import config
from .records import AuthorizationRecord, error_row


class ResultWriter:
    """Append-only CSV sink for scrape results."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._handle = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._handle)
        self.rows_written = 0
        self._write(config.OUTPUT_HEADER)

    def _write(self, row: Sequence[str]) -> None:
        self._writer.writerow(row)
        self._handle.flush()
        os.fsync(self._handle.fileno())

    def write_record(self, record: AuthorizationRecord) -> None:
        self._write(record.as_row())
        self.rows_written += 1

    def write_navigation_error(self, product_id: str) -> None:
        self._write(error_row(product_id, config.NAVIGATION_ERROR_MARKER))
        self.rows_written += 1

    def write_error(self, product_id: str, message: str) -> None:
        self._write(error_row(product_id, f"Error: {message}"))
        self.rows_written += 1

    def close(self) -> None:
        if self._handle.closed:
            return
        self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __enter__(self) -> "ResultWriter":
        return self

    def __exit__(self, *_exc: object) -> Optional[bool]:
        self.close()
        return None


__all__ = ["ResultWriter"]
