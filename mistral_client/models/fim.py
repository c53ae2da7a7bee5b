"""Fill-in-the-middle request/response models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import UsageInfo


class FIMRequest(BaseModel):
    """Request body for ``POST /v1/fim``: complete the code between prefix and suffix."""

    model: str
    prefix: str
    suffix: str = ""
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stream: bool = False
    stop: Optional[List[str]] = None


class FIMChoice(BaseModel):
    index: int = 0
    text: str = ""
    finish_reason: Optional[str] = None


class FIMResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[FIMChoice] = Field(default_factory=list)
    usage: UsageInfo = Field(default_factory=UsageInfo)


__all__ = ["FIMRequest", "FIMChoice", "FIMResponse"]
