"""Pytest configuration for the cannedhttp test suite.

Fixtures build fresh transports per test; nothing is shared between tests,
which is the point of the per-instance responder mapping.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterator, List

import httpx
import pytest

from cannedhttp import CancellationToken, MockTransport
from cannedhttp.base.logging import get_logger


@pytest.fixture()
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture()
def client(transport: MockTransport) -> Iterator[httpx.Client]:
    with transport.client() as c:
        yield c


@pytest.fixture()
def token() -> CancellationToken:
    return CancellationToken()


@pytest.fixture()
def gate() -> Iterator[threading.Event]:
    """Event responders block on; always released at teardown so no thread outlives the test."""

    event = threading.Event()
    yield event
    event.set()


@pytest.fixture()
def log_records(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[logging.LogRecord]]:
    """Capture every record reaching the shared ``cannedhttp`` logger at DEBUG level."""

    monkeypatch.setenv("CANNEDHTTP_LOG_LEVEL", "DEBUG")
    records: List[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = records.append  # type: ignore[method-assign]
    base = get_logger()
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)

