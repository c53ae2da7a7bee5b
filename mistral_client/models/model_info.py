"""Model catalogue models (``/v1/models``)."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class Model(BaseModel):
    id: str
    object: str = ""
    created: int = 0
    owned_by: str = ""
    permissions: List[Any] = Field(default_factory=list)
    root: Optional[str] = None
    parent: Optional[str] = None


class ModelList(BaseModel):
    object: str = ""
    data: List[Model] = Field(default_factory=list)


class ModelCapability(BaseModel):
    name: str
    description: str = ""
    available: bool = False


class ModelPerformance(BaseModel):
    metric: str
    value: float = 0.0
    unit: str = ""


class TokenCosts(BaseModel):
    input: float = 0.0
    output: float = 0.0


class EnhancedModel(Model):
    """Model with version, capability, performance and pricing details."""

    version: str = ""
    description: str = ""
    capabilities: List[ModelCapability] = Field(default_factory=list)
    performance: List[ModelPerformance] = Field(default_factory=list)
    max_tokens: int = 0
    token_costs: TokenCosts = Field(default_factory=TokenCosts)


__all__ = ["Model", "ModelList", "ModelCapability", "ModelPerformance", "TokenCosts", "EnhancedModel"]
