"""Embedding request/response models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import UsageInfo


class EmbeddingRequest(BaseModel):
    model: str
    input: List[str]


class EmbeddingData(BaseModel):
    object: str = ""
    embedding: List[float] = Field(default_factory=list)
    index: int = 0


class EmbeddingResponse(BaseModel):
    id: str = ""
    object: str = ""
    data: List[EmbeddingData] = Field(default_factory=list)
    model: str = ""
    usage: UsageInfo = Field(default_factory=UsageInfo)


class EnhancedEmbeddingRequest(BaseModel):
    """Embedding request with encoding and normalization options.

    Attributes:
        encoding_format: e.g. ``"float"`` or ``"base64"``.
        normalize: Return unit-length vectors.
        truncate: Truncate inputs longer than the model context.
    """

    model: str
    input: List[str]
    encoding_format: Optional[str] = None
    normalize: Optional[bool] = None
    truncate: Optional[bool] = None


class EmbeddingMetadata(BaseModel):
    dimensions: int = 0
    similarity_metric: str = ""
    truncated: Optional[List[bool]] = None


class EnhancedEmbeddingResponse(BaseModel):
    object: str = ""
    data: List[EmbeddingData] = Field(default_factory=list)
    model: str = ""
    usage: UsageInfo = Field(default_factory=UsageInfo)
    metadata: Optional[EmbeddingMetadata] = None


__all__ = [
    "EmbeddingRequest",
    "EmbeddingData",
    "EmbeddingResponse",
    "EnhancedEmbeddingRequest",
    "EmbeddingMetadata",
    "EnhancedEmbeddingResponse",
]
