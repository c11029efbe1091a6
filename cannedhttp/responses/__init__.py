"""Canned response bodies, response builders and responder factories."""

from .bodies import BodySource, RestartableBody, ThrottledBody
from .builders import (
    JSON_CONTENT_TYPE,
    XML_CONTENT_TYPE,
    clone_response,
    encode_json,
    encode_xml,
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

__all__ = [
    "BodySource",
    "RestartableBody",
    "ThrottledBody",
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
