"""Invocation parts package public surface.

Prefer importing from `cannedhttp.base.invocation` for the stable surface.
"""

from .outcome import Outcome
from .result_conduit import ResultConduit
from .cancelable_invoker import Responder, call_responder, cancellation_signal, run_cancelable

__all__ = [
    "Outcome",
    "ResultConduit",
    "Responder",
    "call_responder",
    "cancellation_signal",
    "run_cancelable",
]
