from __future__ import annotations

import pytest

from cannedhttp import CloseNotifyingRecorder, MockError, MockTransport, cancellable_extensions
from cannedhttp.base.errors import ErrorCode


def test_write_implies_ok_status() -> None:
    recorder = CloseNotifyingRecorder()
    recorder.write("hello ")
    recorder.write(b"world")
    assert recorder.status_code == 200
    assert recorder.body == b"hello world"


def test_first_status_wins() -> None:
    recorder = CloseNotifyingRecorder()
    recorder.write_header(404)
    recorder.write_header(500)
    recorder.write("gone")
    assert recorder.status_code == 404


def test_result_snapshot() -> None:
    recorder = CloseNotifyingRecorder()
    recorder.headers["Content-Type"] = "text/plain"
    recorder.write_header(202)
    recorder.write("queued")
    response = recorder.result()
    assert response.status_code == 202
    assert response.headers["content-type"] == "text/plain"
    assert response.text == "queued"


def test_close_fires_notification_once() -> None:
    recorder = CloseNotifyingRecorder()
    notify = recorder.close_notify()
    assert not recorder.closed and not notify.cancelled
    recorder.close()
    recorder.close()
    assert recorder.closed
    assert notify.wait(0) is True
    assert notify.reason == "client closed connection"


def test_close_cancels_attached_request(transport: MockTransport, gate) -> None:
    recorder = CloseNotifyingRecorder()

    def responder(request):
        gate.wait()
        recorder.write("never")
        return recorder.result()

    transport.register_responder("GET", "https://api.example.com/stream", responder)
    recorder.close()
    with transport.client() as client, pytest.raises(MockError) as info:
        client.get(
            "https://api.example.com/stream",
            extensions=cancellable_extensions(recorder.close_notify()),
        )
    assert info.value.code is ErrorCode.CANCELLED
