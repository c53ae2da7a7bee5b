"""Moderation request/response models."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from .common import Message


class ModerationRequest(BaseModel):
    input: List[str]
    model: str


class ChatModerationRequest(BaseModel):
    """Moderation of whole conversations (``POST /v1/chat/moderations``)."""

    input: List[Message]
    model: str


class ModerationResult(BaseModel):
    categories: Dict[str, bool] = Field(default_factory=dict)
    category_scores: Dict[str, float] = Field(default_factory=dict)


class ModerationResponse(BaseModel):
    id: str = ""
    model: str = ""
    results: List[ModerationResult] = Field(default_factory=list)


__all__ = ["ModerationRequest", "ChatModerationRequest", "ModerationResult", "ModerationResponse"]
