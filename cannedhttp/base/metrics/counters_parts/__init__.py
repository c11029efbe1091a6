"""Transport metrics package.

Exports transport counters and snapshots.
"""

from .latency_stats_snapshot import LatencyStatsSnapshot
from .transport_counters_snapshot import TransportCountersSnapshot
from .transport_counters import TransportCounters

__all__ = [
    "TransportCounters",
    "TransportCountersSnapshot",
    "LatencyStatsSnapshot",
]
