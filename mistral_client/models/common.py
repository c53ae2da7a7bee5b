"""
Shared pydantic models used by several endpoints.

Response models default every field so partial payloads (streaming chunks,
sparse error-tolerant responses) still validate; unknown fields are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class UsageInfo(BaseModel):
    """Token usage information for an API call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Message(BaseModel):
    """A chat message.

    Attributes:
        role: ``system``, ``user``, ``assistant`` or ``tool``.
        content: Text or structured content parts; passed through as-is.
    """

    role: str
    content: Any = None


class DeltaMessage(BaseModel):
    """Incremental message fragment carried by streaming chunks."""

    role: Optional[str] = None
    content: Any = None


class Function(BaseModel):
    """A callable function exposed to the model as a tool."""

    name: str
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)


class Tool(BaseModel):
    """A tool the model may call."""

    type: str = "function"
    function: Function


__all__ = ["UsageInfo", "Message", "DeltaMessage", "Function", "Tool"]
