"""
Normalized mock transport error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `MockError`. Values are
lowercase snake_case and are used verbatim in structured log events and in
the failure buckets of the transport counters.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes representing failure categories."""

    CANCELLED = "cancelled"
    RESPONDER_FAULT = "responder_fault"
    RESPONDER_ERROR = "responder_error"
    NO_RESPONDER = "no_responder"
    ENCODING = "encoding"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
