"""Fine-tuning jobs service."""
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..models.fine_tuning import FineTuningJob, FineTuningJobList, FineTuningJobRequest
from .base import BaseService


class FineTuningService(BaseService):
    service_name = "fine_tuning"

    def create(
        self,
        model: str,
        training_files: Sequence[str],
        hyperparameters: Optional[Dict[str, Any]] = None,
    ) -> FineTuningJob:
        request = FineTuningJobRequest(
            model=model,
            training_files=list(training_files),
            hyperparameters=dict(hyperparameters or {}),
        )
        return self._post("fine_tuning/jobs", request, FineTuningJob)

    def list(self) -> FineTuningJobList:
        return self._get("fine_tuning/jobs", FineTuningJobList)

    def get(self, job_id: str) -> FineTuningJob:
        return self._get(f"fine_tuning/jobs/{job_id}", FineTuningJob)

    def cancel(self, job_id: str) -> FineTuningJob:
        return self._post(f"fine_tuning/jobs/{job_id}/cancel", None, FineTuningJob)


__all__ = ["FineTuningService"]
