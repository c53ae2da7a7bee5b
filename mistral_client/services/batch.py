"""Batch service: submit, inspect, cancel and wait for batch jobs."""
from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..base.polling import BatchPoller, PollConfig, PollResult
from ..base.http import Transport
from ..base.http.transport import encode_body
from ..config.defaults import (
    DEFAULT_BATCH_MAX_CONCURRENCY,
    DEFAULT_CHAT_BATCH_CHUNK_SIZE,
    DEFAULT_EMBEDDINGS_BATCH_CHUNK_SIZE,
    DEFAULT_POLL_INTERVAL_SECONDS,
)
from ..models.batch import BatchOptions, BatchRequest, BatchResponse
from ..models.chat import ChatCompletionRequest
from ..models.embeddings import EmbeddingRequest
from .base import BaseService


class BatchService(BaseService):
    """Batch jobs.

    Parameters:
        transport: Shared transport.
        poll_interval: Default interval for :meth:`wait_for_completion` when
            no ``PollConfig`` is given.
    """

    service_name = "batch"

    def __init__(self, transport: Transport, *, poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS) -> None:
        super().__init__(transport)
        self._poll_interval = poll_interval

    def create(self, request: BatchRequest) -> BatchResponse:
        return self._post("batch", request, BatchResponse)

    def get(self, batch_id: str) -> BatchResponse:
        return self._get(f"batch/{batch_id}", BatchResponse)

    def cancel(self, batch_id: str) -> None:
        self._transport.request("POST", f"batch/{batch_id}/cancel")

    def create_chat(
        self,
        requests: Sequence[ChatCompletionRequest],
        options: Optional[BatchOptions] = None,
    ) -> BatchResponse:
        """Submit chat completions as one batch; the model of the first request is used.

        Raises:
            ValueError: when ``requests`` is empty.
        """
        if not requests:
            raise ValueError("at least one chat request is required")
        if options is None:
            options = BatchOptions(
                max_concurrency=DEFAULT_BATCH_MAX_CONCURRENCY,
                chunk_size=DEFAULT_CHAT_BATCH_CHUNK_SIZE,
            )
        batch = BatchRequest(
            requests=[encode_body(r) for r in requests],
            model=requests[0].model,
            options=options,
        )
        return self.create(batch)

    def create_embeddings(
        self,
        texts: Sequence[str],
        model: str,
        options: Optional[BatchOptions] = None,
    ) -> BatchResponse:
        """Submit one single-input embedding request per text."""
        if options is None:
            options = BatchOptions(
                max_concurrency=DEFAULT_BATCH_MAX_CONCURRENCY,
                chunk_size=DEFAULT_EMBEDDINGS_BATCH_CHUNK_SIZE,
            )
        batch = BatchRequest(
            requests=[encode_body(EmbeddingRequest(model=model, input=[text])) for text in texts],
            model=model,
            options=options,
        )
        return self.create(batch)

    def wait_for_completion(
        self,
        batch_id: str,
        config: Optional[PollConfig] = None,
        *,
        wait: Optional[Callable[[float], bool]] = None,
    ) -> PollResult[BatchResponse]:
        """Poll ``batch_id`` until every sub-request succeeded or failed.

        Returns a cancelled ``PollResult`` when ``config.cancel`` fires;
        ``result.unwrap()`` turns that into :class:`CancelledError`.
        Errors from the status lookup propagate unchanged.
        """
        if config is None:
            config = PollConfig(interval=self._poll_interval)
        return BatchPoller(batch_id, self.get, config, wait=wait).wait_for_completion()


__all__ = ["BatchService"]
