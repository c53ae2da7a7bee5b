"""Shared plumbing for the resource services.

Services translate typed calls into ``Transport`` requests and validate the
JSON bodies into pydantic models. They hold no state beyond the transport and
never retry.
"""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from ..base.http import Transport
from ..base.logging import LogContext
from ..base.streaming import StreamDecoder

M = TypeVar("M", bound=BaseModel)

STREAM_REQUIRED_MESSAGE = "stream must be set to true for streaming requests"


class BaseService:
    """Base class holding the transport and the JSON helpers.

    Subclasses set ``service_name``; it becomes the ``service`` field of
    logging contexts.
    """

    service_name: str = "api"

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def _get(self, path: str, response_type: Type[M]) -> M:
        return response_type.model_validate(self._transport.request_json("GET", path))

    def _post(self, path: str, body: Any, response_type: Type[M]) -> M:
        return response_type.model_validate(self._transport.request_json("POST", path, body))

    def _request_as(self, method: str, path: str, body: Any, shape: Any) -> Any:
        """Request and validate the body against any pydantic-compatible type."""
        return TypeAdapter(shape).validate_python(self._transport.request_json(method, path, body))


class StreamingService(BaseService):
    """Service with a streaming variant of ``create``."""

    stream_path: str = ""

    def _open_stream(self, request: Any, message_type: Type[M], model: Optional[str] = None) -> StreamDecoder[M]:
        """Validate ``request.stream`` and return a decoder over the response.

        Raises:
            ValueError: when ``request.stream`` is not ``True``.
            APIError: on a non-2xx status; no decoder is created.
        """
        if getattr(request, "stream", False) is not True:
            raise ValueError(STREAM_REQUIRED_MESSAGE)
        handle = self._transport.open_stream("POST", self.stream_path, request)
        ctx = LogContext(service=self.service_name, model=model or getattr(request, "model", None))
        return StreamDecoder(handle, message_type, ctx=ctx)


__all__ = ["BaseService", "StreamingService", "STREAM_REQUIRED_MESSAGE"]
