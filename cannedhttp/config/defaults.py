"""cannedhttp.config.defaults
==========================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables (see
``cannedhttp.config.get_settings``) or explicit constructor arguments.

This module intentionally imports nothing from the rest of the package so it
can be used from any layer without circular imports.
"""

from __future__ import annotations

# ---- Requests ----
# ``httpx.Request.extensions`` key under which a caller stores the CancellationToken.
CANCEL_EXTENSION_KEY = "cancel"

# ---- Invoker ----
# Message carried by the error reported when the cancellation signal wins.
REQUEST_CANCELED_MESSAGE = "request canceled"
# Prefix of the message reported when a responder faults instead of returning.
RESPONDER_FAULT_PREFIX = "panic in responder"
# Thread name prefixes, visible in debuggers and thread dumps.
WATCHER_THREAD_NAME = "cannedhttp-watcher"
EXECUTOR_THREAD_NAME = "cannedhttp-executor"

# ---- Bodies ----
# Transfer rate used by slow responses when none is given.
DEFAULT_THROTTLE_BYTES_PER_SECOND = 4096
# Chunk size yielded when a canned body is iterated by httpx.
DEFAULT_CHUNK_SIZE = 64 * 1024

# ---- Transport ----
DEFAULT_NO_RESPONDER_MESSAGE = "no responder found"

# ---- Logging ----
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_JSON = True


__all__ = [
    "CANCEL_EXTENSION_KEY",
    "REQUEST_CANCELED_MESSAGE",
    "RESPONDER_FAULT_PREFIX",
    "WATCHER_THREAD_NAME",
    "EXECUTOR_THREAD_NAME",
    "DEFAULT_THROTTLE_BYTES_PER_SECOND",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_NO_RESPONDER_MESSAGE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
]
