"""Chat completion request/response models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .common import DeltaMessage, Message, Tool, UsageInfo


class ChatCompletionRequest(BaseModel):
    """Request body for ``POST /v1/chat/completions``.

    ``stream`` must be ``True`` for ``ChatService.create_stream``.
    """

    model: str
    messages: List[Message]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    stream: bool = False
    stop: Optional[List[str]] = None
    random_seed: Optional[int] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[str] = None
    response_format: Optional[Union[str, Dict[str, Any]]] = None


class ChatCompletionChoice(BaseModel):
    """A completion choice.

    Full responses carry ``message``; streaming chunks carry ``delta``.
    """

    index: int = 0
    message: Optional[Message] = None
    delta: Optional[DeltaMessage] = None
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    """Chat completion response, also the type of each streamed chunk."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatCompletionChoice] = Field(default_factory=list)
    usage: UsageInfo = Field(default_factory=UsageInfo)


__all__ = ["ChatCompletionRequest", "ChatCompletionChoice", "ChatCompletionResponse"]
