from __future__ import annotations

"""Error code taxonomy for per-product scrape failures.

Codes appear in structured log lines and in the run summary so a batch can be
explained after the fact. Keep them stable.
"""


class ErrorCode:
    NAVIGATION = "navigation_failed"
    ELEMENT_NOT_FOUND = "element_not_found"
    NO_PARAGRAPHS = "no_paragraphs"
    EXTRACTION = "extraction_failed"
    INTERNAL = "internal_error"


__all__ = ["ErrorCode"]
