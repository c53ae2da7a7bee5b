"""Authenticated JSON transport over ``httpx``.

``Transport`` is the only component that talks to the network. Services call
``request_json`` for ordinary request/response endpoints and ``open_stream``
for event-stream endpoints. Any non-2xx status is turned into
:class:`APIError` before a body is handed back; for streams this happens
before a decoder is ever constructed, and the response is closed.

Transport level failures (``httpx.HTTPError`` subclasses such as connect or
read timeouts) propagate unchanged. Ordinary calls are never retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel

from ..errors import APIError, ErrorCode
from ..errors_parts.classification import classify_status, is_retryable
from ..logging import LogContext, get_logger, log_event
from ..streaming import StreamHandle
from ..timeouts import httpx_timeout
from .client import get_httpx_client
from ...config.defaults import API_VERSION

_STREAM_HEADERS = {
    "Accept": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def parse_base_url(base_url: str) -> httpx.URL:
    """Validate and parse an API base URL.

    Raises:
        ValueError: when the URL cannot be parsed or lacks a scheme or host.
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ValueError(f"invalid base URL {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"invalid base URL {base_url!r}: scheme and host are required")
    return url


def encode_body(body: Any) -> Any:
    """Serialize a request body to JSON-compatible data."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


def error_from_response(response: httpx.Response) -> APIError:
    """Build an :class:`APIError` from a non-2xx response (body must be read)."""
    body = response.text
    message = body
    try:
        parsed = response.json()
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        value = parsed.get("message")
        message = value if isinstance(value, str) else ""
    code = classify_status(response.status_code)
    return APIError(
        code=code,
        message=message,
        status_code=response.status_code,
        method=response.request.method,
        url=str(response.request.url),
        retryable=is_retryable(code),
        raw=body,
    )


class Transport:
    """Issues authenticated requests against the versioned API root.

    Parameters:
        api_key: Bearer token sent on every request.
        base_url: API root, e.g. ``https://api.mistral.ai``. Any path on it is
            replaced by ``/v1/<path>`` when building request URLs.
        user_agent: ``User-Agent`` header value.
        http_client: Optional ``httpx.Client``; defaults to the shared pool.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str,
        user_agent: str,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if not api_key:
            raise APIError(code=ErrorCode.AUTH, message="API key is required")
        self._api_key = api_key
        self._base_url = parse_base_url(base_url)
        self._user_agent = user_agent
        self._http = http_client if http_client is not None else get_httpx_client(str(self._base_url), purpose="api")
        self._logger = get_logger("mistral_client.http")

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def url_for(self, path: str) -> httpx.URL:
        """Resolve an endpoint path (``chat/completions``) to a full URL."""
        return self._base_url.join(f"/{API_VERSION}/{path.lstrip('/')}")

    def headers(self, *, json_body: bool = False, stream: bool = False) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
            "Authorization": f"Bearer {self._api_key}",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        if stream:
            headers.update(_STREAM_HEADERS)
        return headers

    def _check(self, response: httpx.Response, ctx: LogContext) -> None:
        if response.is_success:
            return
        response.read()
        err = error_from_response(response)
        log_event(
            self._logger,
            "http.error",
            ctx,
            level=logging.WARNING,
            status_code=err.status_code,
            error_code=err.code.value,
            message=err.message,
        )
        raise err

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        files: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request and return the (successful) response.

        Raises:
            APIError: on non-2xx responses.
            httpx.HTTPError: on transport failures.
        """
        url = self.url_for(path)
        ctx = LogContext(extra={"method": method, "path": path})
        log_event(self._logger, "http.request", ctx, level=logging.DEBUG)
        response = self._http.request(
            method,
            url,
            json=encode_body(body) if body is not None else None,
            files=files,
            data=data,
            params=params,
            headers=self.headers(json_body=body is not None),
            timeout=httpx_timeout(),
        )
        self._check(response, ctx)
        return response

    def request_json(self, method: str, path: str, body: Any = None) -> Any:
        """Send a JSON request and return the decoded JSON body (``None`` if empty)."""
        response = self.request(method, path, body)
        if not response.content:
            return None
        return response.json()

    def open_stream(self, method: str, path: str, body: Any = None) -> StreamHandle:
        """Open an event-stream response and hand its body to a ``StreamHandle``.

        The status is checked before any body bytes are consumed; on failure
        the response is closed and :class:`APIError` raised.
        """
        url = self.url_for(path)
        ctx = LogContext(extra={"method": method, "path": path})
        request = self._http.build_request(
            method,
            url,
            json=encode_body(body) if body is not None else None,
            headers=self.headers(json_body=body is not None, stream=True),
            timeout=httpx_timeout(stream=True),
        )
        response = self._http.send(request, stream=True)
        try:
            self._check(response, ctx)
        except BaseException:
            response.close()
            raise
        log_event(self._logger, "stream.open", ctx, level=logging.DEBUG, status_code=response.status_code)
        return StreamHandle.from_response(response)


__all__ = ["Transport", "parse_base_url", "encode_body", "error_from_response"]
