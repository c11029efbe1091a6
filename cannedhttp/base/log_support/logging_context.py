"""Structured logging context object for mock exchanges.

This module defines :class:`LogContext`, a dataclass carrying the request
fields every transport log event shares (method, URL, matched route). Its
``to_dict`` helper merges the ``extra`` mapping and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for mock transport logging events."""

    method: Optional[str] = None
    url: Optional[str] = None
    route: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_request(cls, request: Any, route: Optional[str] = None) -> "LogContext":
        """Build a context from anything exposing ``method`` and ``url``."""
        method = getattr(request, "method", None)
        url = getattr(request, "url", None)
        return cls(method=method, url=str(url) if url is not None else None, route=route)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
