"""Tests for the structured logging helpers."""
from __future__ import annotations

import json
import logging

import httpx

from cannedhttp.base.log_support import JsonFormatter, LogContext
from cannedhttp.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


def _payloads(records):
    return [json.loads(r.getMessage()) for r in records]


def test_child_loggers_propagate_to_base(log_records):
    logger = get_logger("cannedhttp.test")
    assert logger.propagate and not logger.handlers
    logger.info("plain")
    assert [r.getMessage() for r in log_records] == ["plain"]


def test_base_logger_level_follows_settings(monkeypatch):
    monkeypatch.setenv("CANNEDHTTP_LOG_LEVEL", "ERROR")
    assert get_logger().level == logging.ERROR
    monkeypatch.setenv("CANNEDHTTP_LOG_LEVEL", "info")
    assert get_logger(BASE_LOGGER_NAME).level == logging.INFO


def test_log_event_drops_none_and_merges_context(log_records):
    ctx = LogContext(method="GET", url="https://x/y", extra={"attempt": 1, "skip": None})
    log_event(get_logger("cannedhttp.test"), "demo", ctx, status=200, missing=None)
    (payload,) = _payloads(log_records)
    assert payload == {"event": "demo", "method": "GET", "url": "https://x/y", "attempt": 1, "status": 200}


def test_log_event_skips_disabled_levels(log_records):
    log_event(get_logger("cannedhttp.test"), "quiet", level=logging.NOTSET + 1)
    assert log_records == []


def test_normalized_event_has_required_keys(log_records):
    normalized_log_event(get_logger("cannedhttp.test"), "norm", phase="dispatch", error_code="cancelled", emitted=False)
    normalized_log_event(get_logger("cannedhttp.test"), "ok", phase="dispatch", phase_note="x")
    first, second = _payloads(log_records)
    assert all(key in first for key in REQUIRED_NORMALIZED_KEYS)
    assert first["structured"] is True and first["error_code"] == "cancelled"
    assert "error_code" not in second
    assert second["emitted"] is None and second["phase_note"] == "x"


def test_normalized_extra_fields_cannot_override_keys(log_records):
    normalized_log_event(get_logger("cannedhttp.test"), "e", phase="watch", structured=False)
    (payload,) = _payloads(log_records)
    assert payload["structured"] is True


def test_log_context_for_request():
    request = httpx.Request("DELETE", "https://api.example.com/items/1")
    ctx = LogContext.for_request(request, route="DELETE https://api.example.com/items/1")
    assert ctx.to_dict() == {
        "method": "DELETE",
        "url": "https://api.example.com/items/1",
        "route": "DELETE https://api.example.com/items/1",
    }


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("cannedhttp.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 2}), None, None)
    record.custom = "extra"
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["n"] == 2
    assert out["level"] == "INFO" and out["logger"] == "cannedhttp.x"
    assert out["custom"] == "extra"
    assert "lineno" not in out


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord("cannedhttp", logging.WARNING, __file__, 1, "hello %s", ("there",), None)
    out = json.loads(JsonFormatter().format(record))
    assert out["msg"] == "hello there"


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "cannedhttp.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        log_event(logger, "to.file", level=logging.WARNING, n=1)
        for handler in logger.handlers:
            handler.flush()
        lines = path.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["event"] == "to.file"
        again = configure_logger(file_path=str(path))
        assert sum(isinstance(h, logging.FileHandler) for h in again.handlers) == 1
    finally:
        configure_logger(file_path=None)
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger(BASE_LOGGER_NAME).handlers)
