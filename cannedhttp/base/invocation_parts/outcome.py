"""Outcome of a single responder invocation.

An ``Outcome`` holds exactly one meaningful slot: either the response or the
error. The invoker returns it as a value so the race between responder and
cancellation never raises inside the worker threads; callers that prefer
exceptions use :meth:`Outcome.unwrap`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class Outcome:
    """``(response, error)`` pair delivered once per invocation."""

    response: Optional[httpx.Response] = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of response or error")

    @classmethod
    def success(cls, response: httpx.Response) -> "Outcome":
        return cls(response=response)

    @classmethod
    def failure(cls, error: BaseException) -> "Outcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> httpx.Response:
        """Return the response or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.response is not None  # nosec B101 - guaranteed by __post_init__
        return self.response


__all__ = ["Outcome"]
