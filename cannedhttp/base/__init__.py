"""
cannedhttp Base Package

Transport-agnostic building blocks shared by the mock transport:
- Cancellation: one-shot broadcast signal attached to requests
- Invocation: the responder-versus-cancellation race
- Errors: normalized error taxonomy
- Logging and metrics: structured events and in-memory counters
"""

from .cancellation import CancellationToken, CancelledError
from .errors import ErrorCode, MockError, classify_exception
from .invocation import Outcome, Responder, ResultConduit, call_responder, run_cancelable
from .metrics import TransportCounters, TransportCountersSnapshot

__all__ = [
    "CancellationToken",
    "CancelledError",
    "ErrorCode",
    "MockError",
    "classify_exception",
    "Outcome",
    "Responder",
    "ResultConduit",
    "call_responder",
    "run_cancelable",
    "TransportCounters",
    "TransportCountersSnapshot",
]
