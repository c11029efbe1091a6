"""Unified configuration layer for the mock transport.

Merge order (later wins):
    1. Built-in defaults from ``cannedhttp.config.defaults``
    2. Environment variables

Environment Variables
---------------------
CANNEDHTTP_LOG_LEVEL     logging level name for the ``cannedhttp`` logger
CANNEDHTTP_LOG_JSON      ``0``/``false`` switches log output to plain text
CANNEDHTTP_THROTTLE_BPS  default bytes per second of slow bodies
CANNEDHTTP_CANCEL_KEY    ``request.extensions`` key holding the cancellation token

Invalid values are ignored field by field so a typo never breaks a test run.

Public API
----------
* get_settings() -> TransportSettings
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from .defaults import (
    CANCEL_EXTENSION_KEY,
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THROTTLE_BYTES_PER_SECOND,
)


class TransportSettings(BaseModel):
    """Validated runtime settings.

    Attributes
    ----------
    log_level:
        Level name applied to the shared ``cannedhttp`` logger.
    log_json:
        Whether console logs are JSON lines (default) or plain text.
    throttle_bytes_per_second:
        Default rate used by ``ThrottledBody`` and slow responders.
    cancel_extension_key:
        Key looked up in ``httpx.Request.extensions`` for the cancellation token.
    """

    model_config = {"frozen": True}

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = DEFAULT_LOG_JSON
    throttle_bytes_per_second: int = Field(default=DEFAULT_THROTTLE_BYTES_PER_SECOND, gt=0)
    cancel_extension_key: str = Field(default=CANCEL_EXTENSION_KEY, min_length=1)


ENV_FIELD_MAP: Dict[str, str] = {
    "log_level": "CANNEDHTTP_LOG_LEVEL",
    "log_json": "CANNEDHTTP_LOG_JSON",
    "throttle_bytes_per_second": "CANNEDHTTP_THROTTLE_BPS",
    "cancel_extension_key": "CANNEDHTTP_CANCEL_KEY",
}

_CACHED: Optional[TransportSettings] = None
# Env values the cache was built from; a change invalidates it so tests can monkeypatch.
_ENV_GUARD: Optional[Tuple[Optional[str], ...]] = None


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def _validated(overrides: Dict[str, Any]) -> TransportSettings:
    """Build settings, dropping individual overrides that fail validation."""
    try:
        return TransportSettings(**overrides)
    except ValidationError as exc:
        bad = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        kept = {k: v for k, v in overrides.items() if k not in bad}
        return TransportSettings(**kept)


def get_settings() -> TransportSettings:
    """Return process-cached settings, rebuilt when the relevant env vars change."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = tuple(os.getenv(name) for name in ENV_FIELD_MAP.values())
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    _CACHED = _validated(_env_overrides())
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TransportSettings",
    "ENV_FIELD_MAP",
    "get_settings",
]
