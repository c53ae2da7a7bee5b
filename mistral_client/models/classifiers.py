"""Classifier request/response models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .common import UsageInfo


class ClassifierRequest(BaseModel):
    model: str
    input: List[str]
    labels: List[str]
    multi_label: Optional[bool] = None
    temperature: Optional[float] = None


class ClassifierResult(BaseModel):
    input: str = ""
    labels: List[str] = Field(default_factory=list)
    scores: Dict[str, float] = Field(default_factory=dict)
    confidence: float = 0.0


class ClassifierResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    results: List[ClassifierResult] = Field(default_factory=list)
    usage: UsageInfo = Field(default_factory=UsageInfo)


__all__ = ["ClassifierRequest", "ClassifierResult", "ClassifierResponse"]
