"""Single-slot result conduit used to race watcher and executor threads."""
from __future__ import annotations

import queue
from threading import Lock

from .outcome import Outcome


class ResultConduit:
    """First-writer-wins handoff of one :class:`Outcome`.

    ``offer`` never blocks: the first call stores its outcome and returns
    ``True``; every later call returns ``False`` and drops its outcome, whether
    or not the reader already consumed the first one. Created fresh for each
    invocation and never reused.
    """

    def __init__(self) -> None:
        self._slot: "queue.Queue[Outcome]" = queue.Queue(maxsize=1)
        self._lock = Lock()
        self._filled = False

    @property
    def filled(self) -> bool:
        return self._filled

    def offer(self, outcome: Outcome) -> bool:
        with self._lock:
            if self._filled:
                return False
            self._filled = True
        self._slot.put_nowait(outcome)
        return True

    def take(self, timeout: float | None = None) -> Outcome:
        """Block until the first outcome is available and return it.

        Raises ``queue.Empty`` only when ``timeout`` is given and elapses.
        """
        return self._slot.get(timeout=timeout)


__all__ = ["ResultConduit"]
