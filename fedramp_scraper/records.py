from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional

from . import config


@dataclass
class AuthorizationRecord:
    """Authorization details scraped for a single marketplace product.

    Fields left as ``None`` were not found on the page (or were blank) and
    render as empty CSV cells.
    """

    id: str
    fedramp_ready: Optional[str] = None
    authorizing_entity_review: Optional[str] = None
    pmo_review: Optional[str] = None
    fedramp_authorized: Optional[str] = None
    annual_assessment: Optional[str] = None
    independent_assessor: Optional[str] = None

    def as_row(self) -> List[str]:
        """Return the CSV cells in ``config.OUTPUT_HEADER`` order."""

        return [
            self.id,
            self.fedramp_ready or "",
            self.authorizing_entity_review or "",
            self.pmo_review or "",
            self.fedramp_authorized or "",
            self.annual_assessment or "",
            self.independent_assessor or "",
        ]

    def found_fields(self) -> List[str]:
        return [
            f.name
            for f in fields(self)
            if f.name != "id" and getattr(self, f.name) is not None
        ]


def error_row(product_id: str, message: str) -> List[str]:
    """Return a placeholder row carrying ``message`` in the second column."""

    padding = [""] * (len(config.OUTPUT_HEADER) - 2)
    return [product_id, message, *padding]


__all__ = ["AuthorizationRecord", "error_row"]
