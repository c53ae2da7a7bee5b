"""Model catalogue service."""
from __future__ import annotations

from typing import List

from ..models.model_info import EnhancedModel, Model, ModelCapability, ModelList, ModelPerformance
from .base import BaseService


class ModelsService(BaseService):
    service_name = "models"

    def list(self) -> ModelList:
        return self._get("models", ModelList)

    def get(self, model_id: str) -> Model:
        return self._get(f"models/{model_id}", Model)

    def get_enhanced(self, model_id: str) -> EnhancedModel:
        return self._get(f"models/{model_id}/enhanced", EnhancedModel)

    def list_versions(self, model_id: str) -> List[EnhancedModel]:
        return self._request_as("GET", f"models/{model_id}/versions", None, List[EnhancedModel])

    def get_capabilities(self, model_id: str) -> List[ModelCapability]:
        return self._request_as("GET", f"models/{model_id}/capabilities", None, List[ModelCapability])

    def get_performance(self, model_id: str) -> List[ModelPerformance]:
        return self._request_as("GET", f"models/{model_id}/performance", None, List[ModelPerformance])

    def estimate_tokens(self, model_id: str, text: str) -> int:
        """Token count of ``text`` for the given model."""
        data = self._transport.request_json("POST", f"models/{model_id}/tokenize", {"text": text}) or {}
        return int(data.get("token_count", 0))


__all__ = ["ModelsService"]
