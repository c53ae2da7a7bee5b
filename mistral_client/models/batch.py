"""Batch processing models.

``BatchResponse`` doubles as the batch job snapshot consumed by the poller:
the job is complete once ``summary.succeeded + summary.failed`` reaches
``summary.total_requests``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RetryPolicy(BaseModel):
    """Server-side retry settings for batch sub-requests (delays in ms)."""

    max_attempts: int
    initial_delay: int
    max_delay: int


class BatchOptions(BaseModel):
    """Batch execution options.

    Attributes:
        timeout: Seconds.
        chunk_size: Sub-requests per chunk for large batches.
    """

    max_concurrency: Optional[int] = None
    retry_config: Optional[RetryPolicy] = None
    timeout: Optional[int] = None
    chunk_size: Optional[int] = None


class BatchRequest(BaseModel):
    requests: List[Dict[str, Any]]
    model: str
    options: BatchOptions = Field(default_factory=BatchOptions)


class BatchResult(BaseModel):
    """Outcome of one sub-request. ``duration`` is in milliseconds."""

    index: int = 0
    status: str = ""
    response: Any = None
    error: Optional[str] = None
    attempts: int = 0
    duration: int = 0


class BatchSummary(BaseModel):
    """Aggregate counters (durations in ms)."""

    total_requests: int = 0
    succeeded: int = 0
    failed: int = 0
    total_duration: int = 0
    average_duration: int = 0
    tokens_used: int = 0
    total_cost: float = 0.0


class BatchResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    results: List[BatchResult] = Field(default_factory=list)
    summary: BatchSummary = Field(default_factory=BatchSummary)


__all__ = ["RetryPolicy", "BatchOptions", "BatchRequest", "BatchResult", "BatchSummary", "BatchResponse"]
