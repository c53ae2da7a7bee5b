"""OCR service."""
from __future__ import annotations

from ..models.ocr import OCRAsyncJob, OCRRequest, OCRResponse
from .base import BaseService


class OCRService(BaseService):
    service_name = "ocr"

    def create(self, request: OCRRequest) -> OCRResponse:
        return self._post("ocr", request, OCRResponse)

    def create_async(self, request: OCRRequest) -> str:
        """Submit an OCR job and return its id."""
        return self._post("ocr/async", request, OCRAsyncJob).job_id

    def get_async_result(self, job_id: str) -> OCRResponse:
        return self._get(f"ocr/async/{job_id}", OCRResponse)


__all__ = ["OCRService"]
