"""Response recorder with a one-shot close notification.

``CloseNotifyingRecorder`` captures what a handler writes (status, headers,
body) and lets a test simulate the client hanging up: ``close()`` fires the
token returned by ``close_notify()``. That token is a regular
:class:`CancellationToken`, so it can also be attached to a request through
``cancellable_extensions`` to cancel an in-flight mock exchange.
"""
from __future__ import annotations

import io
from threading import Lock
from typing import Optional

import httpx

from .base.cancellation import CancellationToken

_CLIENT_CLOSED = "client closed connection"


class CloseNotifyingRecorder:
    """In-memory response sink exposing a one-shot "closed" notification."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._status_code: Optional[int] = None
        self._headers = httpx.Headers()
        self._body = io.BytesIO()
        self._closed = CancellationToken()

    # -------------------------- Writer side -------------------------- #
    @property
    def headers(self) -> httpx.Headers:
        """Mutable header map; changes after the status is written are still recorded."""
        return self._headers

    def write_header(self, status_code: int) -> None:
        """Record the status code; only the first call has effect."""
        with self._lock:
            if self._status_code is None:
                self._status_code = status_code

    def write(self, data: bytes | str) -> int:
        """Append ``data`` to the body, implying status 200 if none was written."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        with self._lock:
            if self._status_code is None:
                self._status_code = 200
            return self._body.write(data)

    def close(self) -> None:
        """Simulate the client closing the connection; repeated calls are no-ops."""
        self._closed.cancel(_CLIENT_CLOSED)

    def close_notify(self) -> CancellationToken:
        return self._closed

    # -------------------------- Reader side -------------------------- #
    @property
    def closed(self) -> bool:
        return self._closed.cancelled

    @property
    def status_code(self) -> int:
        """Recorded status; 200 when the handler wrote nothing explicit."""
        return self._status_code if self._status_code is not None else 200

    @property
    def body(self) -> bytes:
        with self._lock:
            return self._body.getvalue()

    def result(self) -> httpx.Response:
        """Return an ``httpx.Response`` snapshot of everything recorded so far."""
        return httpx.Response(self.status_code, headers=self._headers.copy(), content=self.body)


__all__ = ["CloseNotifyingRecorder"]
