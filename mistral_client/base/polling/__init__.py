"""Polling package: cancellable batch completion loop."""

from .poll_config import PollConfig
from .poll_result import PollResult
from .batch_poller import BatchPoller, is_complete, job_counters

__all__ = ["PollConfig", "PollResult", "BatchPoller", "is_complete", "job_counters"]
