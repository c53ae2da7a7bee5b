"""Unit tests for the authenticated transport."""
from __future__ import annotations

import json

import httpx
import pytest

from mistral_client.base.errors import APIError, ErrorCode
from mistral_client.base.http import Transport, close_all_clients, get_httpx_client
from mistral_client.base.http.transport import parse_base_url
from mistral_client.models import Message
from mistral_client.models.chat import ChatCompletionRequest

BASE = "https://api.test.local"


def _transport(handler, **kwargs) -> Transport:
    kwargs.setdefault("base_url", BASE)
    kwargs.setdefault("user_agent", "ua/1")
    return Transport("secret", http_client=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs)


def test_missing_api_key_is_auth_error():
    with pytest.raises(APIError) as exc_info:
        Transport("", base_url=BASE, user_agent="ua/1", http_client=httpx.Client())
    assert exc_info.value.code is ErrorCode.AUTH  # nosec B101


@pytest.mark.parametrize("bad", ["://invalid-url", "not a url", "ftp://host", "https://"])
def test_parse_base_url_rejects_invalid(bad):
    with pytest.raises(ValueError):
        parse_base_url(bad)


def test_url_for_prefixes_api_version():
    transport = _transport(lambda r: httpx.Response(200))
    assert transport.url_for("models/x").path == "/v1/models/x"  # nosec B101
    nested = _transport(lambda r: httpx.Response(200), base_url="https://proxy.local/some/prefix")
    assert str(nested.url_for("/chat/completions")) == "https://proxy.local/v1/chat/completions"  # nosec B101


def test_request_json_sends_headers_and_model_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={"ok": True})

    transport = _transport(handler)
    body = ChatCompletionRequest(model="m", messages=[Message(role="user", content="hi")])
    assert transport.request_json("POST", "chat/completions", body) == {"ok": True}  # nosec B101

    request = seen["request"]
    assert request.headers["authorization"] == "Bearer secret"  # nosec B101
    assert request.headers["user-agent"] == "ua/1"  # nosec B101
    assert request.headers["accept"] == "application/json"  # nosec B101
    assert request.headers["content-type"] == "application/json"  # nosec B101
    sent = json.loads(request.content)
    assert sent == {"model": "m", "messages": [{"role": "user", "content": "hi"}], "stream": False}  # nosec B101


def test_request_json_empty_body_returns_none():
    transport = _transport(lambda r: httpx.Response(204))
    assert transport.request_json("DELETE", "files/f1") is None  # nosec B101


def test_non_2xx_json_message_becomes_api_error(log_events):
    transport = _transport(lambda r: httpx.Response(400, json={"message": "error message"}))
    with pytest.raises(APIError) as exc_info:
        transport.request_json("GET", "test")
    err = exc_info.value
    assert err.message == "error message" and err.status_code == 400  # nosec B101
    assert err.code is ErrorCode.VALIDATION and err.method == "GET"  # nosec B101
    assert err.url == f"{BASE}/v1/test"  # nosec B101
    assert str(err) == f"GET {BASE}/v1/test: 400 error message"  # nosec B101
    (event,) = log_events("http.error")
    assert event["status_code"] == 400 and event["error_code"] == "validation"  # nosec B101


def test_non_json_error_body_is_used_verbatim():
    transport = _transport(lambda r: httpx.Response(503, text="upstream down"))
    with pytest.raises(APIError) as exc_info:
        transport.request("GET", "models")
    assert exc_info.value.message == "upstream down" and exc_info.value.retryable is True  # nosec B101


def test_transport_errors_propagate_unchanged():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(httpx.ConnectError):
        _transport(handler).request_json("GET", "models")


def test_open_stream_sends_stream_headers_and_yields_lines():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        return httpx.Response(200, content=b"line one\nline two\n")

    handle = _transport(handler).open_stream("POST", "chat/completions", {"stream": True})
    try:
        assert handle.read_line() == "line one"  # nosec B101
        assert handle.read_line() == "line two"  # nosec B101
        assert handle.read_line() is None  # nosec B101
    finally:
        handle.close()
    headers = seen["headers"]
    assert headers["accept"] == "text/event-stream"  # nosec B101
    assert headers["cache-control"] == "no-cache" and headers["connection"] == "keep-alive"  # nosec B101


def test_open_stream_error_status_raises_before_reading():
    transport = _transport(lambda r: httpx.Response(429, json={"message": "slow down"}))
    with pytest.raises(APIError) as exc_info:
        transport.open_stream("POST", "chat/completions", {"stream": True})
    assert exc_info.value.code is ErrorCode.RATE_LIMIT and exc_info.value.message == "slow down"  # nosec B101


def test_default_http_client_comes_from_pool():
    close_all_clients()
    try:
        transport = Transport("secret", base_url=BASE, user_agent="ua/1")
        assert transport.http_client is get_httpx_client(str(transport.base_url), purpose="api")  # nosec B101
    finally:
        close_all_clients()
