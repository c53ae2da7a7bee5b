"""File models (``/v1/files``)."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class File(BaseModel):
    """An uploaded file.

    ``created_at`` accepts both unix seconds and RFC 3339 timestamps.
    """

    id: str
    object: str = ""
    bytes: int = 0
    created_at: Optional[datetime] = None
    filename: str = ""
    purpose: str = ""


class FileList(BaseModel):
    object: str = ""
    data: List[File] = Field(default_factory=list)


__all__ = ["File", "FileList"]
