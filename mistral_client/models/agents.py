"""Agent chat request/response models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import Message, UsageInfo


class AgentFunction(BaseModel):
    name: str
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)


class AgentTool(BaseModel):
    type: str = "function"
    function: AgentFunction


class AgentAction(BaseModel):
    """An action taken by the agent (tool call with optional reasoning)."""

    tool: str = ""
    input: Dict[str, Any] = Field(default_factory=dict)
    thought: Optional[str] = None
    response: Optional[str] = None


class AgentRequest(BaseModel):
    """Request body for ``POST /v1/agents/chat``."""

    model: str
    tools: List[AgentTool] = Field(default_factory=list)
    messages: List[Message]
    max_actions: Optional[int] = None
    stream: bool = False
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    stop: Optional[List[str]] = None


class AgentResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    actions: List[AgentAction] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    usage: UsageInfo = Field(default_factory=UsageInfo)


__all__ = ["AgentFunction", "AgentTool", "AgentAction", "AgentRequest", "AgentResponse"]
