"""Mock httpx transport package."""

from .mock_transport import (
    NO_RESPONDER_ROUTE,
    MockTransport,
    cancellable_extensions,
    route_key,
    route_name,
)

__all__ = [
    "MockTransport",
    "NO_RESPONDER_ROUTE",
    "cancellable_extensions",
    "route_key",
    "route_name",
]
