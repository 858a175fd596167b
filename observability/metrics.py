"""Per-call tracking for Okta API requests."""

from __future__ import annotations

from collections import deque

from schemas.observability import CallRecord


class CallMetrics:
    """Keeps the most recent call records of one client.

    Only the last ``max_records`` calls are retained, so every figure below
    describes that window. ``reset()`` empties it.
    """

    def __init__(self, max_records: int = 1000) -> None:
        self.records: deque[CallRecord] = deque(maxlen=max_records)

    def record(self, rec: CallRecord) -> None:
        self.records.append(rec)

    def reset(self) -> None:
        self.records.clear()

    @property
    def total_calls(self) -> int:
        return len(self.records)

    @property
    def failed_calls(self) -> int:
        return sum(1 for r in self.records if not r.success)

    @property
    def avg_latency_ms(self) -> float:
        if not self.records:
            return 0.0
        return round(sum(r.latency_ms for r in self.records) / len(self.records), 2)

    @property
    def endpoints(self) -> list[str]:
        return [r.endpoint for r in self.records]

    def summary(self) -> dict:
        return {
            "total_calls": self.total_calls,
            "failed_calls": self.failed_calls,
            "avg_latency_ms": self.avg_latency_ms,
        }
