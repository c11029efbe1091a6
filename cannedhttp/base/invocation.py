"""Cancelable responder invocation (public API facade).

Re-exports ``run_cancelable`` and its value types from ``invocation_parts``.
"""

from .invocation_parts.outcome import Outcome
from .invocation_parts.result_conduit import ResultConduit
from .invocation_parts.cancelable_invoker import (
    Responder,
    call_responder,
    cancellation_signal,
    run_cancelable,
)

__all__ = [
    "Outcome",
    "ResultConduit",
    "Responder",
    "call_responder",
    "cancellation_signal",
    "run_cancelable",
]
