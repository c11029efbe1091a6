"""Cancellation error type.

Defines the public ``CancelledError`` raised by code that polls a cancellation
token instead of racing it (see ``CancellationToken.raise_if_cancelled``).
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation observes that its cancellation token fired.

    Distinct from ``MockError(CANCELLED)``: the invoker reports a lost race as a
    value in its ``Outcome``, while this exception is for cooperative checks
    inside responders that want to stop early.
    """

__all__ = ["CancelledError"]
