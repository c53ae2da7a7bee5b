"""Agents service."""
from __future__ import annotations

from ..base.streaming import StreamDecoder
from ..models.agents import AgentRequest, AgentResponse
from .base import StreamingService


class AgentsService(StreamingService):
    service_name = "agents"
    stream_path = "agents/chat"

    def create(self, request: AgentRequest) -> AgentResponse:
        return self._post("agents/chat", request, AgentResponse)

    def create_stream(self, request: AgentRequest) -> StreamDecoder[AgentResponse]:
        return self._open_stream(request, AgentResponse)


__all__ = ["AgentsService"]
