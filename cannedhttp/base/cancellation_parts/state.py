"""Immutable snapshot of a cancellation token's signal.

The token swaps in a new ``State`` under its lock when it fires, so readers
always see ``cancelled`` and ``reason`` from the same moment without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class State:
    """Fired flag plus the reason given by the first ``cancel`` call."""

    cancelled: bool = False
    reason: Optional[str] = None

    def fired(self, reason: Optional[str]) -> "State":
        """Return the fired state; an already fired state is returned unchanged."""
        if self.cancelled:
            return self
        return State(cancelled=True, reason=reason)


__all__ = ["State"]
