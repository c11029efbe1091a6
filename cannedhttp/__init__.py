"""cannedhttp package

Test double for ``httpx`` clients: a transport that answers outbound requests
with canned responses and honours per-request cancellation.

Public API (re-exported):
    - Version: ``__version__``
    - Transport: :class:`MockTransport`, :func:`cancellable_extensions`
    - Core: :func:`run_cancelable`, :class:`Outcome`, :class:`CancellationToken`
    - Exceptions: :class:`MockError`, :class:`ErrorCode`, :class:`CancelledError`
    - Collaborators: body streams, response builders and responders,
      :class:`CloseNotifyingRecorder`

Example::

    transport = MockTransport()
    transport.register_responder("GET", "https://api.example.com/ping",
                                 new_string_responder(200, "pong"))
    with transport.client() as client:
        assert client.get("https://api.example.com/ping").text == "pong"
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorCode, MockError
from .base.invocation import Outcome, Responder, run_cancelable
from .recorder import CloseNotifyingRecorder
from .responses import (
    RestartableBody,
    ThrottledBody,
    new_bytes_responder,
    new_bytes_response,
    new_json_responder,
    new_json_response,
    new_slow_string_responder,
    new_slow_string_response,
    new_string_responder,
    new_string_responder_with_delay,
    new_string_response,
    new_xml_responder,
    new_xml_response,
    responder_from_delay_response,
    responder_from_response,
)
from .transport import MockTransport, cancellable_extensions

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CancellationToken",
    "CancelledError",
    "CloseNotifyingRecorder",
    "ErrorCode",
    "MockError",
    "MockTransport",
    "Outcome",
    "Responder",
    "RestartableBody",
    "ThrottledBody",
    "cancellable_extensions",
    "new_bytes_responder",
    "new_bytes_response",
    "new_json_responder",
    "new_json_response",
    "new_slow_string_responder",
    "new_slow_string_response",
    "new_string_responder",
    "new_string_responder_with_delay",
    "new_string_response",
    "new_xml_responder",
    "new_xml_response",
    "responder_from_delay_response",
    "responder_from_response",
    "run_cancelable",
]
