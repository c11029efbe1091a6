"""Canned response bodies.

Both bodies are ``httpx.SyncByteStream`` implementations, so they can be
handed straight to ``httpx.Response(stream=...)``, and they also expose a
file-like ``read``.

``RestartableBody``
    Rewinds to the start whenever it reports exhaustion or is closed, so one
    canned body can be shared by every response a responder hands out and
    read again and again, even after a partially streamed response.

``ThrottledBody``
    A restartable body that returns at most one byte per read and waits
    ``1 / bytes_per_second`` seconds before each byte, simulating a slow
    transfer. An optional :class:`CancellationToken` interrupts the wait.
"""
from __future__ import annotations

import io
import time
from threading import Lock
from typing import Iterator, Optional, Union

import httpx

from ..base.cancellation import CancellationToken, CancelledError
from ..config import get_settings
from ..config.defaults import DEFAULT_CHUNK_SIZE

BodySource = Union[str, bytes, bytearray, memoryview]


def _as_bytes(data: BodySource) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class RestartableBody(httpx.SyncByteStream):
    """In-memory body that rewinds to its start when exhausted.

    ``read()`` without a size returns everything from the current position
    and rewinds. A sized ``read`` that returns ``b""`` signals exhaustion and
    rewinds, so the next read starts over. Iteration yields chunks until the
    end and leaves the body rewound.

    ``close`` rewinds rather than closing, so a response abandoned halfway
    does not shift where the next one starts. Reads are serialized by a lock,
    but two consumers interleaving reads on a shared body still see each
    other's positions.
    """

    def __init__(self, data: BodySource, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._data = _as_bytes(data)
        self._buffer = io.BytesIO(self._data)
        self._lock = Lock()
        self._chunk_size = chunk_size

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    def _read_chunk(self, size: int) -> bytes:
        return self._buffer.read(size)

    def read(self, size: Optional[int] = -1) -> bytes:
        if size == 0:
            return b""
        with self._lock:
            chunk = self._read_chunk(-1 if size is None else size)
            if size is None or size < 0 or not chunk:
                self._buffer.seek(0)
            return chunk

    def rewind(self) -> None:
        with self._lock:
            self._buffer.seek(0)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self._chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self) -> None:
        """Rewind instead of closing, so the next response starts from the top."""
        self.rewind()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"{type(self).__name__}(size={len(self._data)})"


class ThrottledBody(RestartableBody):
    """Restartable body paced to ``bytes_per_second``, one byte per read.

    ``read()`` without a size drains the remainder byte by byte, so fully
    reading ``n`` bytes takes at least ``n / bytes_per_second`` seconds.

    When ``token`` fires, the pending read raises :class:`CancelledError`
    instead of finishing its wait.
    """

    def __init__(
        self,
        data: BodySource,
        bytes_per_second: Optional[int] = None,
        *,
        token: Optional[CancellationToken] = None,
    ) -> None:
        bps = bytes_per_second if bytes_per_second is not None else get_settings().throttle_bytes_per_second
        if bps <= 0:
            raise ValueError("bytes_per_second must be positive")
        super().__init__(data, chunk_size=1)
        self._delay = 1.0 / bps
        self._token = token

    @property
    def delay(self) -> float:
        return self._delay

    def _pause(self) -> None:
        if self._token is None:
            time.sleep(self._delay)
            return
        self._token.raise_if_cancelled()
        if self._token.wait(self._delay):
            raise CancelledError(self._token.reason or "body read cancelled")

    def _read_one(self) -> bytes:
        self._pause()
        return self._buffer.read(1)

    def _read_chunk(self, size: int) -> bytes:
        if size > 0:
            return self._read_one()
        out = bytearray()
        while True:
            byte = self._read_one()
            if not byte:
                return bytes(out)
            out += byte


__all__ = ["BodySource", "RestartableBody", "ThrottledBody"]
