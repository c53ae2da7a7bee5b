"""Chat completions service."""
from __future__ import annotations

from ..base.streaming import StreamDecoder
from ..models.chat import ChatCompletionRequest, ChatCompletionResponse
from .base import StreamingService


class ChatService(StreamingService):
    """``POST /v1/chat/completions``, blocking and streaming."""

    service_name = "chat"
    stream_path = "chat/completions"

    def create(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        return self._post("chat/completions", request, ChatCompletionResponse)

    def create_stream(self, request: ChatCompletionRequest) -> StreamDecoder[ChatCompletionResponse]:
        """Stream completion chunks. ``request.stream`` must be ``True``.

        The returned decoder owns the connection; use it as a context manager
        or call ``close()`` when abandoning it early.
        """
        return self._open_stream(request, ChatCompletionResponse)


__all__ = ["ChatService"]
