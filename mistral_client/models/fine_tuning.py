"""Fine-tuning job models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class FineTuningJobRequest(BaseModel):
    model: str
    training_files: List[str]
    hyperparameters: Dict[str, Any] = Field(default_factory=dict)


class FineTuningJob(BaseModel):
    id: str
    model: str = ""
    status: str = ""
    training_files: List[str] = Field(default_factory=list)
    validation_files: Optional[List[str]] = None
    hyperparameters: Dict[str, Any] = Field(default_factory=dict)
    result_files: Optional[List[str]] = None
    created_at: int = 0
    finished_at: Optional[int] = None


class FineTuningJobList(BaseModel):
    object: str = ""
    data: List[FineTuningJob] = Field(default_factory=list)


__all__ = ["FineTuningJobRequest", "FineTuningJob", "FineTuningJobList"]
