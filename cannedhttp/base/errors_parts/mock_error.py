"""
Structured mock transport exception type.

Wraps every failure the transport reports (cancellation, responder faults,
missing responders, encoding problems) with a normalized `ErrorCode`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class MockError(Exception):
    """Represents a structured mock transport error with a normalized code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message; this is exactly what ``str()`` returns.
        method: HTTP method of the request involved, when known.
        url: URL of the request involved, when known.
        raw: Original exception for diagnostics (e.g. the responder fault).
    """

    code: ErrorCode
    message: str
    method: Optional[str] = None
    url: Optional[str] = None
    raw: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


__all__ = ["MockError"]
