"""Transport counters snapshot dataclass.

Immutable snapshot of mock transport counters, suitable for assertions in
tests and for structured logging.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .latency_stats_snapshot import LatencyStatsSnapshot


@dataclass(frozen=True)
class TransportCountersSnapshot:
    """Immutable point-in-time snapshot of transport counters.

    ``calls_by_route`` is keyed by ``"METHOD URL"`` for matched responders and
    ``"NO_RESPONDER"`` for requests served by the fallback.
    """

    total: int
    success: int
    failure: int
    cancelled: int
    unmatched: int
    in_flight: int
    failure_by_code: Dict[str, int]
    calls_by_route: Dict[str, int]
    latency: LatencyStatsSnapshot
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["TransportCountersSnapshot"]
