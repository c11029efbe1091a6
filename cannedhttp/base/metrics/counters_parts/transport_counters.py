"""Thread-safe in-memory counters for mock transport exchanges.

One instance lives on each ``MockTransport``. Cancelled exchanges are counted
separately from failures because losing the race to the caller's cancellation
is an expected outcome, not a responder problem.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict, Optional, Any
import time

from .latency_stats_snapshot import LatencyStatsSnapshot
from .transport_counters_snapshot import TransportCountersSnapshot


class TransportCounters:
    """Thread-safe in-memory counters for mock exchanges."""

    __slots__ = (
        "_lock",
        "_total",
        "_success",
        "_failure",
        "_cancelled",
        "_unmatched",
        "_in_flight",
        "_failure_by_code",
        "_calls_by_route",
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self) -> None:
        self._lock = RLock()
        self._failure_by_code: Dict[str, int] = {}
        self._calls_by_route: Dict[str, int] = {}
        self._in_flight = 0
        self._zero()

    def _zero(self) -> None:
        self._total = 0
        self._success = 0
        self._failure = 0
        self._cancelled = 0
        self._unmatched = 0
        self._failure_by_code.clear()
        self._calls_by_route.clear()
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    @staticmethod
    def monotonic_ms() -> int:
        """Return current monotonic time in milliseconds for latency measurement."""
        return int(time.monotonic() * 1000)

    # -------------------------- Record Methods -------------------------- #
    def record_start(self, route: str) -> None:
        """Record a request dispatched to ``route``."""
        with self._lock:
            self._total += 1
            self._in_flight += 1
            self._calls_by_route[route] = self._calls_by_route.get(route, 0) + 1

    def record_unmatched(self) -> None:
        """Record that no registered responder matched the request."""
        with self._lock:
            self._unmatched += 1

    def record_success(self, latency_ms: int) -> None:
        with self._lock:
            self._success += 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_failure(self, error_code: str, latency_ms: Optional[int] = None) -> None:
        """Record a failed exchange bucketed by its error code."""
        with self._lock:
            self._failure += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)
            if latency_ms is not None:
                self._update_latency(latency_ms)

    def record_cancelled(self) -> None:
        with self._lock:
            self._cancelled += 1
            self._in_flight = max(0, self._in_flight - 1)

    def _update_latency(self, latency_ms: int) -> None:
        if latency_ms < 0:
            return
        if self._latency_min is None or latency_ms < self._latency_min:
            self._latency_min = latency_ms
        if self._latency_max is None or latency_ms > self._latency_max:
            self._latency_max = latency_ms
        self._latency_count += 1
        self._latency_total += latency_ms

    # -------------------------- Queries -------------------------- #
    def calls(self, route: str | None = None) -> int:
        """Return the number of calls to ``route``, or all dispatched calls."""
        with self._lock:
            if route is None:
                return sum(self._calls_by_route.values())
            return self._calls_by_route.get(route, 0)

    def calls_by_route(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._calls_by_route)

    def snapshot(self, reset: bool = False) -> TransportCountersSnapshot:
        """Return an immutable snapshot of current counters.

        Args:
            reset: If True, zero counters after creating the snapshot (in-flight
                exchanges are preserved).
        """
        with self._lock:
            snapshot = TransportCountersSnapshot(
                total=self._total,
                success=self._success,
                failure=self._failure,
                cancelled=self._cancelled,
                unmatched=self._unmatched,
                in_flight=self._in_flight,
                failure_by_code=dict(self._failure_by_code),
                calls_by_route=dict(self._calls_by_route),
                latency=LatencyStatsSnapshot.from_totals(
                    self._latency_count,
                    self._latency_total,
                    self._latency_min,
                    self._latency_max,
                ),
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._zero()
            return snapshot

    def as_dict(self, reset: bool = False) -> Dict[str, Any]:
        """Convenience wrapper returning snapshot converted to dictionary."""
        return self.snapshot(reset=reset).to_dict()


__all__ = ["TransportCounters"]
