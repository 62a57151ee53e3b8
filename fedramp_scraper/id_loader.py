"""Load product identifiers from a newline-delimited input file."""
from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .utils import log_debug


def split_id_lines(data: bytes) -> List[bytes]:
    """Split raw file contents into lines.

    Lines end at ``\\n`` with an optional preceding ``\\r``; a final newline
    does not produce an extra empty line.
    """

    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


def load_ids(path: Union[str, Path]) -> List[str]:
    """Return the identifiers listed in ``path``, one per line, in file order.

    Raises ``OSError`` when the file cannot be opened. Lines that are not valid
    UTF-8 are skipped; empty lines are kept as empty identifiers.
    """

    with open(path, "rb") as handle:
        data = handle.read()

    ids: List[str] = []
    for line_no, raw in enumerate(split_id_lines(data), start=1):
        try:
            ids.append(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            log_debug(f"[INPUT] Skipping unreadable line {line_no} in {path}: {exc}")
            continue
    return ids


__all__ = ["load_ids", "split_id_lines"]
