"""Per-run outcome counters."""

from __future__ import annotations

import time
from collections import defaultdict
from typing import Any, Dict, List, Optional


class RunTelemetry:
    """Collect per-product outcomes for the end-of-run summary."""

    def __init__(self, total: int) -> None:
        self.total = total
        self.started_at = time.time()
        self.entries: List[Dict[str, Any]] = []
        self.summary: Dict[str, int] = defaultdict(int)
        self.fail_reasons: Dict[str, int] = defaultdict(int)

    def add(self, product_id: str, status: str, reason: Optional[str] = None) -> None:
        self.entries.append({"id": product_id, "status": status, "reason": reason})
        self.summary[f"count_{status}"] += 1
        if status == "failed" and reason:
            self.fail_reasons[reason] += 1

    def finalize(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return {
            "total": self.total,
            "processed": len(self.entries),
            "succeeded": self.summary.get("count_success", 0),
            "failed": self.summary.get("count_failed", 0),
            "fail_reasons": dict(self.fail_reasons),
            "started_at": self.started_at,
            "ended_at": time.time(),
            **(extra or {}),
        }


__all__ = ["RunTelemetry"]
