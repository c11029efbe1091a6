"""Run a responder against a request, racing it against the request's cancellation.

Purpose
-------
``run_cancelable`` is the core of the mock transport. For a request carrying a
:class:`CancellationToken` it starts two daemon threads and returns whichever
outcome lands in a fresh :class:`ResultConduit` first:

* the **watcher** waits for "token fired OR stand-down" and, if the token won,
  offers ``MockError(CANCELLED, "request canceled")``;
* the **executor** calls the responder inside a fault boundary and offers its
  response, its own reported error, or a ``RESPONDER_FAULT`` error.

After taking the first outcome the invoker always signals stand-down so a
watcher whose token never fires exits instead of waiting forever.

Failure modes
-------------
- A responder that never returns combined with a token that never fires blocks
  the caller forever; no timeout is enforced here.
- When cancellation wins, the executor is left to finish in the background and
  its outcome is discarded. Responders are not assumed to be interruptible; a
  responder that wants to stop early can poll the token itself.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

import httpx

from ...config import get_settings
from ...config.defaults import (
    EXECUTOR_THREAD_NAME,
    REQUEST_CANCELED_MESSAGE,
    RESPONDER_FAULT_PREFIX,
    WATCHER_THREAD_NAME,
)
from ..cancellation import CancellationToken
from ..errors import ErrorCode, MockError, is_responder_error
from ..logging import LogContext, get_logger, normalized_log_event
from .outcome import Outcome
from .result_conduit import ResultConduit

Responder = Callable[[httpx.Request], httpx.Response]

LOGGER_NAME = "cannedhttp.invoker"
_STAND_DOWN = "stand-down"


def cancellation_signal(request: httpx.Request, key: Optional[str] = None) -> Optional[CancellationToken]:
    """Return the cancellation token attached to ``request``, if any.

    Raises:
        TypeError: when the extension slot holds something other than a
            :class:`CancellationToken`.
    """
    token = request.extensions.get(key or get_settings().cancel_extension_key)
    if token is None:
        return None
    if not isinstance(token, CancellationToken):
        raise TypeError(f"request cancellation extension must be a CancellationToken, got {type(token).__name__}")
    return token


def _fault(exc: BaseException, request: httpx.Request) -> MockError:
    err = MockError(
        ErrorCode.RESPONDER_FAULT,
        f"{RESPONDER_FAULT_PREFIX}: got {str(exc) or type(exc).__name__!r}",
        method=request.method,
        url=str(request.url),
        raw=exc,
    )
    err.__cause__ = exc
    return err


def call_responder(responder: Responder, request: httpx.Request) -> Outcome:
    """Invoke ``responder`` once inside a fault boundary.

    Errors the responder reports itself (``MockError``, ``httpx.HTTPError``)
    pass through verbatim; any other exception, or a return value that is not
    an ``httpx.Response``, becomes a ``RESPONDER_FAULT`` error.
    """
    try:
        response = responder(request)
    except Exception as exc:  # noqa: BLE001 - fault boundary
        if is_responder_error(exc):
            return Outcome.failure(exc)
        return Outcome.failure(_fault(exc, request))
    if not isinstance(response, httpx.Response):
        return Outcome.failure(_fault(TypeError(f"responder returned {type(response).__name__}"), request))
    return Outcome.success(response)


def _log_fault(logger: logging.Logger, ctx: LogContext, outcome: Outcome) -> None:
    error = outcome.error
    if isinstance(error, MockError) and error.code is ErrorCode.RESPONDER_FAULT:
        normalized_log_event(
            logger,
            "invoke.fault",
            ctx,
            phase="execute",
            error_code=error.code.value,
            emitted=False,
            level=logging.WARNING,
            detail=error.message,
        )


def _watch(
    wake: CancellationToken,
    stand_down: threading.Event,
    conduit: ResultConduit,
    request: httpx.Request,
    logger: logging.Logger,
    ctx: LogContext,
) -> None:
    wake.wait()
    if stand_down.is_set():
        return
    error = MockError(
        ErrorCode.CANCELLED,
        REQUEST_CANCELED_MESSAGE,
        method=request.method,
        url=str(request.url),
    )
    if conduit.offer(Outcome.failure(error)):
        normalized_log_event(logger, "invoke.cancelled", ctx, phase="watch", error_code=error.code.value, emitted=True)


def _execute(
    responder: Responder,
    request: httpx.Request,
    conduit: ResultConduit,
    logger: logging.Logger,
    ctx: LogContext,
) -> None:
    try:
        outcome = call_responder(responder, request)
    except BaseException as exc:
        # SystemExit and friends end this thread; still unblock the caller
        conduit.offer(Outcome.failure(_fault(exc, request)))
        raise
    _log_fault(logger, ctx, outcome)
    if not conduit.offer(outcome):
        normalized_log_event(
            logger,
            "invoke.discarded",
            ctx,
            phase="execute",
            emitted=False,
            level=logging.DEBUG,
            ok=outcome.ok,
        )


def run_cancelable(responder: Responder, request: httpx.Request) -> Outcome:
    """Return the first of responder outcome and cancellation, exactly once.

    Requests without a cancellation token run the responder synchronously on
    the calling thread; no threads are created. The response, or the error the
    responder raised itself, is returned unmodified. Faults are still contained
    on this path: any other exception, or a return value that is not an
    ``httpx.Response``, comes back as ``MockError(RESPONDER_FAULT)`` exactly as
    it would with a token.
    """
    signal = cancellation_signal(request)
    logger = get_logger(LOGGER_NAME)
    ctx = LogContext.for_request(request)
    if signal is None:
        outcome = call_responder(responder, request)
        _log_fault(logger, ctx, outcome)
        return outcome

    conduit = ResultConduit()
    stand_down = threading.Event()
    wake = signal.child()

    watcher = threading.Thread(
        target=_watch,
        args=(wake, stand_down, conduit, request, logger, ctx),
        name=WATCHER_THREAD_NAME,
        daemon=True,
    )
    executor = threading.Thread(
        target=_execute,
        args=(responder, request, conduit, logger, ctx),
        name=EXECUTOR_THREAD_NAME,
        daemon=True,
    )
    watcher.start()
    executor.start()

    outcome = conduit.take()

    # the token may never fire; release the watcher and detach it from the token
    stand_down.set()
    wake.cancel(_STAND_DOWN)
    signal.unlink_child(wake)
    return outcome


__all__ = ["Responder", "call_responder", "cancellation_signal", "run_cancelable"]
