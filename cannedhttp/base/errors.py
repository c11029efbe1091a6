"""Unified mock transport error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``cannedhttp.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.mock_error import MockError
from .errors_parts.classification import classify_exception, is_responder_error

__all__ = ["ErrorCode", "MockError", "classify_exception", "is_responder_error"]
