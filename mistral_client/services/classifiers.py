"""Classifiers service."""
from __future__ import annotations

from typing import Dict, Sequence

from ..base.errors import APIError, ErrorCode
from ..models.classifiers import ClassifierRequest, ClassifierResponse
from .base import BaseService


class ClassifiersService(BaseService):
    service_name = "classifiers"

    def create(self, request: ClassifierRequest) -> ClassifierResponse:
        return self._post("classifiers", request, ClassifierResponse)

    def batch(self, texts: Sequence[str], labels: Sequence[str], model: str) -> ClassifierResponse:
        request = ClassifierRequest(model=model, input=list(texts), labels=list(labels))
        return self.create(request)

    def multi_label(self, request: ClassifierRequest) -> ClassifierResponse:
        """Classify allowing several labels per input.

        The caller's request is left untouched.
        """
        return self.create(request.model_copy(update={"multi_label": True}))

    def confidence(self, text: str, labels: Sequence[str], model: str) -> Dict[str, float]:
        """Per-label scores for a single text.

        Raises:
            APIError: when the response carries no results.
        """
        resp = self.create(ClassifierRequest(model=model, input=[text], labels=list(labels)))
        if not resp.results:
            raise APIError(code=ErrorCode.UNKNOWN, message="no classification results returned")
        return resp.results[0].scores


__all__ = ["ClassifiersService"]
