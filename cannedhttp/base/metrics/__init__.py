"""In-memory metrics for the mock transport.

Counters are plain thread-safe objects owned by each ``MockTransport``; no
exporter is involved, tests read them through ``snapshot()``.
"""
from __future__ import annotations

from .counters_parts import (
    LatencyStatsSnapshot,
    TransportCounters,
    TransportCountersSnapshot,
)

__all__ = [
    "TransportCounters",
    "TransportCountersSnapshot",
    "LatencyStatsSnapshot",
]
