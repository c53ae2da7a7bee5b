"""Fill-in-the-middle service."""
from __future__ import annotations

from ..base.streaming import StreamDecoder
from ..models.fim import FIMRequest, FIMResponse
from .base import StreamingService


class FIMService(StreamingService):
    service_name = "fim"
    stream_path = "fim"

    def create(self, request: FIMRequest) -> FIMResponse:
        return self._post("fim", request, FIMResponse)

    def create_stream(self, request: FIMRequest) -> StreamDecoder[FIMResponse]:
        return self._open_stream(request, FIMResponse)


__all__ = ["FIMService"]
