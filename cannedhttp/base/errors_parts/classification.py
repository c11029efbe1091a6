"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used by the invoker to decide whether an exception raised inside a responder
is the responder's own reported error (passed through verbatim) or a fault
that must be contained and converted.
"""
from __future__ import annotations

import httpx

from ..cancellation_parts.cancelled_error import CancelledError
from .error_code import ErrorCode
from .mock_error import MockError


def is_responder_error(exc: BaseException) -> bool:
    """Return True when ``exc`` is an error a responder may legitimately report.

    Responders signal their own failures by raising :class:`MockError` or any
    ``httpx.HTTPError`` (for example a simulated ``httpx.ConnectError``).
    """
    return isinstance(exc, (MockError, httpx.HTTPError))


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. MockError passthrough.
        2. Cooperative cancellation.
        3. httpx errors reported by a responder.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, MockError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, httpx.HTTPError):
        return ErrorCode.RESPONDER_ERROR
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception", "is_responder_error"]
