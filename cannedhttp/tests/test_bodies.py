"""Tests for restartable and throttled canned bodies."""
from __future__ import annotations

import threading
import time

import httpx
import pytest

from cannedhttp import CancellationToken, CancelledError, RestartableBody, ThrottledBody
from cannedhttp.responses import clone_response


class TestRestartableBody:
    def test_full_read_is_repeatable(self) -> None:
        body = RestartableBody("hello")
        assert body.read() == b"hello"
        assert body.read() == b"hello"
        assert body.size == 5

    def test_sized_reads_rewind_after_exhaustion(self) -> None:
        body = RestartableBody(b"hello")
        assert body.read(3) == b"hel"
        assert body.read(3) == b"lo"
        assert body.read(3) == b""
        assert body.read(3) == b"hel"

    def test_zero_size_read_does_not_move(self) -> None:
        body = RestartableBody("abc")
        assert body.read(1) == b"a"
        assert body.read(0) == b""
        assert body.read(1) == b"b"

    def test_iteration_leaves_body_rewound(self) -> None:
        body = RestartableBody("x" * 10, chunk_size=4)
        assert list(body) == [b"xxxx", b"xxxx", b"xx"]
        assert b"".join(body) == b"x" * 10

    def test_close_rewinds_partially_read_body(self) -> None:
        body = RestartableBody("still here")
        assert body.read(5) == b"still"
        body.close()
        assert body.read() == b"still here"

    def test_rejects_non_positive_chunk_size(self) -> None:
        with pytest.raises(ValueError):
            RestartableBody("abc", chunk_size=0)

    def test_shared_by_successive_responses(self) -> None:
        template = httpx.Response(200, stream=RestartableBody("pong"))
        first, second = clone_response(template), clone_response(template)
        assert first is not second
        assert first.read() == b"pong"
        assert second.read() == b"pong"


class TestThrottledBody:
    def test_sized_read_returns_one_byte(self) -> None:
        body = ThrottledBody("abc", 1000)
        assert body.read(64) == b"a"
        assert body.read(64) == b"b"

    def test_full_read_takes_at_least_length_over_rate(self) -> None:
        data = "abcdefghij"
        body = ThrottledBody(data, 200)
        started = time.monotonic()
        assert body.read() == data.encode()
        assert time.monotonic() - started >= len(data) / 200

    def test_restarts_after_exhaustion(self) -> None:
        body = ThrottledBody("ab", 1000)
        assert body.read() == b"ab"
        assert body.read() == b"ab"

    def test_rate_defaults_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CANNEDHTTP_THROTTLE_BPS", "50")
        assert ThrottledBody("a").delay == pytest.approx(0.02)

    def test_rejects_non_positive_rate(self) -> None:
        with pytest.raises(ValueError):
            ThrottledBody("a", 0)

    def test_fired_token_interrupts_read(self) -> None:
        token = CancellationToken()
        token.cancel("hung up")
        body = ThrottledBody("abc", 1, token=token)
        with pytest.raises(CancelledError, match="hung up"):
            body.read()

    def test_token_fired_mid_read_stops_waiting(self) -> None:
        token = CancellationToken()
        body = ThrottledBody("abcdef", 1, token=token)
        threading.Timer(0.05, token.cancel).start()
        started = time.monotonic()
        with pytest.raises(CancelledError):
            body.read()
        assert time.monotonic() - started < 0.9
