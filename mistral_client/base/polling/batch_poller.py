"""Batch completion poller.

Drives an asynchronous batch job to completion by fetching its status at a
fixed interval until every sub-request has either succeeded or failed, or the
caller cancels.

Loop, per iteration:
    1. cancelled? -> return a cancelled ``PollResult`` (no fetch)
    2. fetch the job (errors propagate unchanged, no retry)
    3. ``succeeded + failed >= total_requests`` -> return the snapshot
    4. wait ``interval`` seconds, interruptible by cancellation

Counters exceeding the total are treated as complete so malformed server data
cannot keep the loop alive forever.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, Protocol, Tuple, TypeVar

from ..errors import classify_exception
from ..logging import LogContext, get_logger, log_event
from .poll_config import PollConfig
from .poll_result import PollResult


class BatchSummaryLike(Protocol):  # pragma: no cover - structural protocol
    total_requests: int
    succeeded: int
    failed: int


class BatchJobLike(Protocol):  # pragma: no cover - structural protocol
    summary: BatchSummaryLike


J = TypeVar("J", bound=BatchJobLike)


def job_counters(job: BatchJobLike) -> Tuple[int, int, int]:
    """Return ``(total, succeeded, failed)`` from a job snapshot."""
    s = job.summary
    return s.total_requests, s.succeeded, s.failed


def is_complete(job: BatchJobLike) -> bool:
    total, succeeded, failed = job_counters(job)
    return succeeded + failed >= total


class BatchPoller(Generic[J]):
    """Polls one batch job until completion or cancellation.

    Parameters:
        job_id: Identifier passed to ``fetch`` on every iteration.
        fetch: Status lookup returning the current job snapshot.
        config: Interval and cancellation signal.
        wait: Blocking wait primitive ``wait(seconds) -> woke_by_cancel``.
            Defaults to ``config.cancel.wait``; tests inject a fake to avoid
            wall-clock delays.
    """

    def __init__(
        self,
        job_id: str,
        fetch: Callable[[str], J],
        config: Optional[PollConfig] = None,
        *,
        wait: Optional[Callable[[float], bool]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._job_id = job_id
        self._fetch = fetch
        self._config = config or PollConfig()
        self._wait = wait or self._config.cancel.wait
        self._logger = logger or get_logger("mistral_client.batch")
        self._running = threading.Lock()

    @property
    def config(self) -> PollConfig:
        return self._config

    def wait_for_completion(self) -> PollResult[J]:
        """Poll until the job completes or the cancellation token fires.

        Raises:
            RuntimeError: if this poller is already running in another thread.
            Exception: whatever ``fetch`` raises, unchanged.
        """
        if not self._running.acquire(blocking=False):
            raise RuntimeError(f"poller for batch {self._job_id} is already running")
        try:
            return self._loop()
        finally:
            self._running.release()

    def _loop(self) -> PollResult[J]:
        token = self._config.cancel
        ctx = LogContext(service="batch", job_id=self._job_id)
        polls = 0
        while True:
            if token.cancelled:
                log_event(self._logger, "batch.poll.cancelled", ctx, polls=polls, reason=token.reason)
                return PollResult(cancelled=True, reason=token.reason, polls=polls)

            try:
                job = self._fetch(self._job_id)
            except Exception as exc:
                log_event(
                    self._logger,
                    "batch.poll.error",
                    ctx,
                    level=logging.WARNING,
                    polls=polls,
                    error_code=classify_exception(exc).value,
                    error=repr(exc),
                )
                raise
            polls += 1

            total, succeeded, failed = job_counters(job)
            log_event(
                self._logger,
                "batch.poll",
                ctx,
                level=logging.DEBUG,
                attempt=polls,
                total=total,
                succeeded=succeeded,
                failed=failed,
            )
            if is_complete(job):
                if succeeded + failed > total:
                    log_event(
                        self._logger,
                        "batch.poll.inconsistent",
                        ctx,
                        level=logging.WARNING,
                        total=total,
                        succeeded=succeeded,
                        failed=failed,
                    )
                log_event(self._logger, "batch.poll.complete", ctx, polls=polls, succeeded=succeeded, failed=failed)
                return PollResult(job=job, polls=polls)

            self._wait(self._config.interval)


__all__ = ["BatchPoller", "job_counters", "is_complete", "BatchJobLike", "BatchSummaryLike"]
