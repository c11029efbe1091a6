"""Cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation signal used by mock requests via the canonical
``cannedhttp.base.cancellation`` import path while the concrete implementations
live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is the one-shot signal a caller attaches to a request
	through ``request.extensions`` to abandon it.
- ``CancelledError`` is raised by code that polls a token cooperatively.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
