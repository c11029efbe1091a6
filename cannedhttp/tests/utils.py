"""Shared helpers for the cannedhttp test suite.

The invoker hands work to background threads, so several tests need to wait
for a condition observed from another thread (a log record, a thread exiting).
"""
from __future__ import annotations

import threading
import time
from typing import Callable, List


def wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
    """Poll ``predicate`` until it holds or ``timeout`` elapses; return its final value."""

    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def live_threads(name: str) -> List[threading.Thread]:
    """Return live threads whose name is exactly ``name``."""

    return [t for t in threading.enumerate() if t.name == name and t.is_alive()]
