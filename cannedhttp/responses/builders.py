"""Builders for canned ``httpx.Response`` objects and the responders serving them.

Response builders (``new_*_response``) create a response whose body is a
:class:`RestartableBody`. Responder factories (``new_*_responder`` and
``responder_from_response``) wrap a canned response in a :data:`Responder`
that hands out a fresh ``httpx.Response`` per call sharing the same canned
body, since httpx binds each response object to the request it answers.

JSON and XML encoding happens once, when the response is built. Encoding
failures raise ``MockError(ENCODING)`` from the builder; responders never
re-encode.

JSON encoding uses ``pydantic_core.to_json`` so pydantic models, dataclasses
and datetimes are accepted alongside plain values.
"""
from __future__ import annotations

import re
import time
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Optional

import httpx
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from ..base.errors import ErrorCode, MockError
from ..base.invocation import Responder
from .bodies import RestartableBody, ThrottledBody

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml"

HeaderTypes = Optional[Mapping[str, str]]

_XML_NAME = re.compile(r"^[A-Za-z_][\w.\-]*$")


def _body_response(status: int, body: httpx.SyncByteStream, headers: HeaderTypes = None) -> httpx.Response:
    return httpx.Response(status, headers=dict(headers or {}), stream=body)


def new_string_response(status: int, body: str, headers: HeaderTypes = None) -> httpx.Response:
    return _body_response(status, RestartableBody(body), headers)


def new_bytes_response(status: int, body: bytes, headers: HeaderTypes = None) -> httpx.Response:
    return _body_response(status, RestartableBody(body), headers)


def encode_json(body: Any) -> bytes:
    """Encode ``body`` as compact JSON, raising ``MockError(ENCODING)`` on failure."""
    try:
        return to_json(body)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise MockError(ErrorCode.ENCODING, f"json encoding failed: {exc}", raw=exc) from exc


def new_json_response(status: int, body: Any, headers: HeaderTypes = None) -> httpx.Response:
    """Build a response whose body is the JSON encoding of ``body``.

    Raises:
        MockError: with ``ErrorCode.ENCODING`` when ``body`` is not serializable.
    """
    response = new_bytes_response(status, encode_json(body), headers)
    response.headers["Content-Type"] = JSON_CONTENT_TYPE
    return response


def _xml_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _xml_element(tag: str, value: Any) -> ET.Element:
    if not _XML_NAME.match(tag):
        raise ValueError(f"invalid xml element name {tag!r}")
    if isinstance(value, BaseModel):
        value = value.model_dump()
    element = ET.Element(tag)
    if isinstance(value, Mapping):
        for key, child in value.items():
            items = child if isinstance(child, (list, tuple)) else [child]
            for item in items:
                element.append(_xml_element(str(key), item))
    elif isinstance(value, (str, int, float, bool)):
        element.text = _xml_text(value)
    elif value is not None:
        raise TypeError(f"xml: unsupported type {type(value).__name__}")
    return element


def encode_xml(body: Any, root: Optional[str] = None) -> bytes:
    """Encode ``body`` as XML, raising ``MockError(ENCODING)`` on failure.

    Accepted shapes:
        - an ``ElementTree.Element``, serialized as is;
        - a pydantic model, rooted at its class name unless ``root`` is given;
        - a mapping with exactly one key and no ``root``: that key is the root;
        - any other mapping or scalar, rooted at ``root`` (default ``"response"``).

    Sequence values become repeated sibling elements; ``None`` an empty element.
    """
    try:
        if isinstance(body, ET.Element):
            return ET.tostring(body, encoding="utf-8")
        if root is None:
            if isinstance(body, BaseModel):
                root = type(body).__name__
            elif isinstance(body, Mapping) and len(body) == 1:
                ((root, body),) = body.items()
                root = str(root)
            else:
                root = "response"
        return ET.tostring(_xml_element(root, body), encoding="utf-8")
    except (TypeError, ValueError) as exc:
        raise MockError(ErrorCode.ENCODING, f"xml encoding failed: {exc}", raw=exc) from exc


def new_xml_response(status: int, body: Any, headers: HeaderTypes = None, *, root: Optional[str] = None) -> httpx.Response:
    """Build a response whose body is the XML encoding of ``body`` (see :func:`encode_xml`)."""
    response = new_bytes_response(status, encode_xml(body, root), headers)
    response.headers["Content-Type"] = XML_CONTENT_TYPE
    return response


def new_slow_string_response(
    status: int,
    body: str,
    bytes_per_second: Optional[int] = None,
    headers: HeaderTypes = None,
) -> httpx.Response:
    """Build a response whose body trickles out at ``bytes_per_second``."""
    return _body_response(status, ThrottledBody(body, bytes_per_second), headers)


# ---------------------------------------------------------------- responders


def clone_response(template: httpx.Response) -> httpx.Response:
    """Return a new, unbound response sharing ``template``'s status, headers and body stream."""
    return httpx.Response(
        template.status_code,
        headers=template.headers.copy(),
        stream=template.stream,
        extensions=dict(template.extensions),
    )


def responder_from_response(response: httpx.Response) -> Responder:
    """Wrap a canned response in a responder that answers every request with it."""

    def responder(request: httpx.Request) -> httpx.Response:
        return clone_response(response)

    return responder


def responder_from_delay_response(delay: float, response: httpx.Response) -> Responder:
    """Like :func:`responder_from_response`, sleeping ``delay`` seconds first.

    The sleep is not interruptible; use it to exercise cancellation of slow responders.
    """

    def responder(request: httpx.Request) -> httpx.Response:
        time.sleep(delay)
        return clone_response(response)

    return responder


def new_string_responder(status: int, body: str) -> Responder:
    return responder_from_response(new_string_response(status, body))


def new_string_responder_with_delay(delay: float, status: int, body: str) -> Responder:
    return responder_from_delay_response(delay, new_string_response(status, body))


def new_bytes_responder(status: int, body: bytes) -> Responder:
    return responder_from_response(new_bytes_response(status, body))


def new_json_responder(status: int, body: Any) -> Responder:
    """Encode ``body`` now and return a responder serving it; raises ``MockError(ENCODING)``."""
    return responder_from_response(new_json_response(status, body))


def new_xml_responder(status: int, body: Any, *, root: Optional[str] = None) -> Responder:
    """Encode ``body`` now and return a responder serving it; raises ``MockError(ENCODING)``."""
    return responder_from_response(new_xml_response(status, body, root=root))


def new_slow_string_responder(status: int, body: str, bytes_per_second: Optional[int] = None) -> Responder:
    return responder_from_response(new_slow_string_response(status, body, bytes_per_second))


__all__ = [
    "JSON_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "clone_response",
    "encode_json",
    "encode_xml",
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
]
