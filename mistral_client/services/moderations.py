"""Moderations service."""
from __future__ import annotations

from typing import Sequence

from ..models.common import Message
from ..models.moderations import ChatModerationRequest, ModerationRequest, ModerationResponse
from .base import BaseService


class ModerationsService(BaseService):
    service_name = "moderations"

    def create(self, request: ModerationRequest) -> ModerationResponse:
        return self._post("moderations", request, ModerationResponse)

    def create_chat(self, messages: Sequence[Message], model: str) -> ModerationResponse:
        """Moderate a conversation as a whole."""
        request = ChatModerationRequest(input=list(messages), model=model)
        return self._post("chat/moderations", request, ModerationResponse)


__all__ = ["ModerationsService"]
