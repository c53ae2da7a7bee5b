"""OCR request/response models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import UsageInfo


class OCRRequest(BaseModel):
    """OCR over previously uploaded images.

    Attributes:
        files: File IDs of uploaded images.
        languages: Optional list of languages to detect.
    """

    model: str
    files: List[str]
    languages: Optional[List[str]] = None


class BoundingBox(BaseModel):
    """Position of a text block; (x, y) is the top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class OCRBlock(BaseModel):
    text: str = ""
    confidence: float = 0.0
    bounding_box: BoundingBox = Field(default_factory=BoundingBox)


class OCRResult(BaseModel):
    file_id: str = ""
    text: str = ""
    language: str = ""
    blocks: List[OCRBlock] = Field(default_factory=list)


class OCRResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    results: List[OCRResult] = Field(default_factory=list)
    usage: UsageInfo = Field(default_factory=UsageInfo)


class OCRAsyncJob(BaseModel):
    job_id: str


__all__ = ["OCRRequest", "BoundingBox", "OCRBlock", "OCRResult", "OCRResponse", "OCRAsyncJob"]
