"""Latency statistics snapshot dataclass.

Immutable aggregate of responder latencies observed by the transport. Only
exchanges that produced a response or a responder error are sampled; a lost
race against cancellation has no meaningful responder latency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LatencyStatsSnapshot:
    """Aggregated responder latency in milliseconds.

    ``min_ms``, ``max_ms`` and ``avg_ms`` are ``None`` until the first sample.
    """

    count: int
    total_ms: int
    min_ms: Optional[int]
    max_ms: Optional[int]
    avg_ms: Optional[float]

    @classmethod
    def from_totals(
        cls,
        count: int,
        total_ms: int,
        min_ms: Optional[int],
        max_ms: Optional[int],
    ) -> "LatencyStatsSnapshot":
        """Build a snapshot from running totals, deriving the mean."""
        return cls(
            count=count,
            total_ms=total_ms,
            min_ms=min_ms,
            max_ms=max_ms,
            avg_ms=total_ms / count if count else None,
        )


__all__ = ["LatencyStatsSnapshot"]
