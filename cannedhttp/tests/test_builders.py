"""Tests for response builders and responder factories."""
from __future__ import annotations

import time
import xml.etree.ElementTree as ET
from typing import List

import httpx
import pytest
from pydantic import BaseModel

from cannedhttp import (
    ErrorCode,
    MockError,
    ThrottledBody,
    new_bytes_responder,
    new_json_responder,
    new_json_response,
    new_slow_string_responder,
    new_string_responder_with_delay,
    new_string_response,
    new_xml_responder,
    new_xml_response,
    responder_from_response,
)
from cannedhttp.responses import encode_json, encode_xml

REQUEST = httpx.Request("GET", "https://api.example.com/thing")


class User(BaseModel):
    name: str
    tags: List[str] = []


def test_string_response_keeps_status_headers_and_body() -> None:
    response = new_string_response(418, "teapot", {"X-Brew": "earl grey"})
    assert response.status_code == 418
    assert response.headers["x-brew"] == "earl grey"
    assert response.read() == b"teapot"


def test_json_response_sets_content_type() -> None:
    response = new_json_response(200, {"ok": True, "items": [1, 2]})
    assert response.headers["content-type"] == "application/json"
    response.read()
    assert response.json() == {"ok": True, "items": [1, 2]}


def test_json_accepts_pydantic_models() -> None:
    assert encode_json(User(name="ann", tags=["a"])) == b'{"name":"ann","tags":["a"]}'


def test_json_encoding_failure_is_reported_by_builder() -> None:
    with pytest.raises(MockError) as info:
        new_json_responder(200, {"bad": object()})
    assert info.value.code is ErrorCode.ENCODING
    assert info.value.raw is not None


def test_xml_response_sets_content_type_and_root() -> None:
    response = new_xml_response(200, {"user": {"name": "ann", "tags": ["a", "b"]}})
    assert response.headers["content-type"] == "application/xml"
    root = ET.fromstring(response.read())
    assert root.tag == "user"
    assert root.findtext("name") == "ann"
    assert [t.text for t in root.findall("tags")] == ["a", "b"]


def test_xml_model_is_rooted_at_class_name() -> None:
    root = ET.fromstring(encode_xml(User(name="bob")))
    assert root.tag == "User"
    assert root.findtext("name") == "bob"


def test_xml_scalars_and_explicit_root() -> None:
    assert ET.fromstring(encode_xml(True)).text == "true"
    assert ET.fromstring(encode_xml(3, root="count")).tag == "count"


def test_xml_element_is_serialized_as_is() -> None:
    element = ET.Element("ping", attrib={"id": "7"})
    assert ET.fromstring(encode_xml(element)).get("id") == "7"


@pytest.mark.parametrize("body", [{"not a tag": 1}, {"item": object()}])
def test_xml_encoding_failure_is_reported_by_builder(body) -> None:
    with pytest.raises(MockError) as info:
        new_xml_responder(200, body)
    assert info.value.code is ErrorCode.ENCODING


def test_responder_hands_out_fresh_responses_sharing_the_body() -> None:
    responder = responder_from_response(new_string_response(200, "pong"))
    first = responder(REQUEST)
    second = responder(REQUEST)
    assert first is not second
    assert first.stream is second.stream
    assert first.read() == second.read() == b"pong"


def test_bytes_and_json_responders() -> None:
    assert new_bytes_responder(201, b"\x00\x01")(REQUEST).read() == b"\x00\x01"
    response = new_json_responder(200, [1, 2, 3])(REQUEST)
    assert response.headers["content-type"] == "application/json"
    assert response.read() == b"[1,2,3]"


def test_delayed_responder_sleeps_before_answering() -> None:
    responder = new_string_responder_with_delay(0.05, 200, "late")
    started = time.monotonic()
    response = responder(REQUEST)
    assert time.monotonic() - started >= 0.05
    assert response.read() == b"late"


def test_slow_responder_uses_throttled_body() -> None:
    response = new_slow_string_responder(200, "abc", 1000)(REQUEST)
    assert isinstance(response.stream, ThrottledBody)
    assert response.read() == b"abc"
