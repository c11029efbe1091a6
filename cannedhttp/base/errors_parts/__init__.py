"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `cannedhttp.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .mock_error import MockError
from .classification import classify_exception, is_responder_error

__all__ = ["ErrorCode", "MockError", "classify_exception", "is_responder_error"]
