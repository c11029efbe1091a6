"""One-shot broadcast cancellation token.

Exposes the ``CancellationToken`` class attached to outbound requests so the
caller can abandon an in-flight mock exchange. Any number of threads may block
on ``wait`` or poll ``cancelled``; only the first ``cancel`` call has effect.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import List

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A fire-once cancellation signal with cascading children.

    Thread-safe. Child tokens inherit cancellation when the parent fires, also
    when they are linked after the parent already fired.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._fired = Event()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def state(self) -> State:
        """Consistent snapshot of ``cancelled`` and ``reason``."""
        return self._state

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Fire the signal, wake every waiter and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state = self._state.fired(reason)
            children = list(self._children)
            self._children.clear()
        self._fired.set()
        for child in children:
            child.cancel(reason)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the token fires or ``timeout`` elapses; return ``cancelled``."""
        return self._fired.wait(timeout)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            should_cancel = self._state.cancelled
            reason = self._state.reason
            if not should_cancel:
                self._children.append(token)
        if should_cancel:
            token.cancel(reason)
        return token

    def unlink_child(self, token: "CancellationToken") -> None:
        """Detach a child so it no longer follows this token; unknown tokens are ignored."""
        with self._lock:
            if token in self._children:
                self._children.remove(token)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        state = self._state
        if state.cancelled:
            raise CancelledError(state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        state = self._state
        return f"CancellationToken(cancelled={state.cancelled}, reason={state.reason!r}, children={len(self._children)})"


__all__ = ["CancellationToken"]
