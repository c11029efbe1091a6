"""Mock ``httpx`` transport serving canned responses.

Purpose
-------
``MockTransport`` plugs into ``httpx.Client(transport=...)`` and answers every
request with a registered :data:`Responder` instead of touching the network.
Each transport owns its responder mapping; nothing is process-wide, so tests
using separate transports never interfere and may run in parallel.

Routing
-------
Exact ``(METHOD, URL)`` lookup. When the full URL has no match, the URL with
its query string removed is tried once. Requests matching nothing go to the
no-responder fallback when one is registered, otherwise they fail with
``MockError(NO_RESPONDER)``.

Cancellation
------------
Every matched responder runs through :func:`run_cancelable`; a request whose
``extensions`` carry a :class:`CancellationToken` (see
:func:`cancellable_extensions`) fails with ``MockError(CANCELLED)`` as soon as
the token fires, even if the responder is still running.
"""
from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Optional, Tuple

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import ErrorCode, MockError, classify_exception
from ..base.invocation import Outcome, Responder, cancellation_signal, run_cancelable
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.metrics import TransportCounters, TransportCountersSnapshot
from ..config import get_settings
from ..config.defaults import DEFAULT_NO_RESPONDER_MESSAGE

NO_RESPONDER_ROUTE = "NO_RESPONDER"

RouteKey = Tuple[str, str]


def route_key(method: str, url: httpx.URL | str) -> RouteKey:
    """Normalize ``method`` and ``url`` into the key used by the responder mapping."""
    return method.upper(), str(httpx.URL(url)).split("#", 1)[0]


def route_name(key: RouteKey) -> str:
    return f"{key[0]} {key[1]}"


def cancellable_extensions(token: CancellationToken, key: Optional[str] = None) -> Dict[str, Any]:
    """Return an ``extensions`` mapping attaching ``token`` to a request.

    Example::

        token = CancellationToken()
        client.get(url, extensions=cancellable_extensions(token))
    """
    return {key or get_settings().cancel_extension_key: token}


class MockTransport(httpx.BaseTransport):
    """``httpx`` transport answering requests from an explicit responder mapping."""

    def __init__(self, *, no_responder: Optional[Responder] = None) -> None:
        self._lock = RLock()
        self._responders: Dict[RouteKey, Responder] = {}
        self._no_responder = no_responder
        self._counters = TransportCounters()
        self._logger = get_logger("cannedhttp.transport")

    # -------------------------- Registration -------------------------- #
    def register_responder(self, method: str, url: httpx.URL | str, responder: Responder) -> None:
        """Answer ``method url`` with ``responder``, replacing any previous one."""
        with self._lock:
            self._responders[route_key(method, url)] = responder

    def register_no_responder(self, responder: Optional[Responder]) -> None:
        """Set (or clear with ``None``) the fallback for unmatched requests."""
        with self._lock:
            self._no_responder = responder

    def deregister_all(self) -> None:
        """Remove every registered responder; the fallback and counters are kept."""
        with self._lock:
            self._responders.clear()

    def reset(self) -> None:
        """Remove responders and fallback, and zero the counters."""
        with self._lock:
            self._responders.clear()
            self._no_responder = None
            self._counters.snapshot(reset=True)

    @property
    def routes(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(route_name(key) for key in self._responders)

    # -------------------------- Dispatch -------------------------- #
    def _match(self, request: httpx.Request) -> Tuple[Optional[str], Optional[Responder]]:
        full = route_key(request.method, request.url)
        bare = (full[0], full[1].split("?", 1)[0])
        with self._lock:
            for key in (full, bare):
                responder = self._responders.get(key)
                if responder is not None:
                    return route_name(key), responder
            if self._no_responder is not None:
                return NO_RESPONDER_ROUTE, self._no_responder
        return None, None

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        route, responder = self._match(request)
        ctx = LogContext.for_request(request, route=route)
        if route is None or route == NO_RESPONDER_ROUTE:
            self._counters.record_unmatched()
            normalized_log_event(
                self._logger,
                "transport.unmatched",
                ctx,
                phase="dispatch",
                error_code=None if route else ErrorCode.NO_RESPONDER.value,
                emitted=route is not None,
            )
        if route is None or responder is None:
            raise MockError(
                ErrorCode.NO_RESPONDER,
                DEFAULT_NO_RESPONDER_MESSAGE,
                method=request.method,
                url=str(request.url),
            )

        # a malformed cancellation extension is rejected before the request is counted
        cancellation_signal(request)
        self._counters.record_start(route)
        started = TransportCounters.monotonic_ms()
        try:
            outcome = run_cancelable(responder, request)
        except BaseException as exc:
            self._counters.record_failure(classify_exception(exc).value, TransportCounters.monotonic_ms() - started)
            raise
        self._record(outcome, TransportCounters.monotonic_ms() - started)
        return outcome.unwrap()

    def _record(self, outcome: Outcome, latency_ms: int) -> None:
        if outcome.error is None:
            self._counters.record_success(latency_ms)
            return
        code = classify_exception(outcome.error)
        if code is ErrorCode.CANCELLED:
            self._counters.record_cancelled()
        else:
            self._counters.record_failure(code.value, latency_ms)

    # -------------------------- Introspection -------------------------- #
    def call_count(self) -> int:
        """Total number of requests dispatched to a responder (fallback included)."""
        return self._counters.calls()

    def call_count_info(self) -> Dict[str, int]:
        """Requests dispatched per route, keyed ``"METHOD URL"`` or ``NO_RESPONDER``."""
        return self._counters.calls_by_route()

    def snapshot(self, reset: bool = False) -> TransportCountersSnapshot:
        return self._counters.snapshot(reset=reset)

    def client(self, **kwargs: Any) -> httpx.Client:
        """Return an ``httpx.Client`` bound to this transport."""
        return httpx.Client(transport=self, **kwargs)


__all__ = [
    "MockTransport",
    "NO_RESPONDER_ROUTE",
    "cancellable_extensions",
    "route_key",
    "route_name",
]
