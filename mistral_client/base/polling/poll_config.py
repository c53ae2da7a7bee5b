"""Polling configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..cancellation import CancellationToken
from ...config.defaults import DEFAULT_POLL_INTERVAL_SECONDS


@dataclass
class PollConfig:
    """Options recognized by :class:`BatchPoller`.

    Attributes:
        interval: Seconds to wait between two status checks. Must be a
            finite positive number.
        cancel: Cooperative cancellation signal. Cancelling it stops the loop
            before the next fetch and cuts the current wait short.
    """

    interval: float = DEFAULT_POLL_INTERVAL_SECONDS
    cancel: CancellationToken = field(default_factory=CancellationToken)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.interval) and self.interval > 0):
            raise ValueError(f"poll interval must be a positive finite number, got {self.interval!r}")


__all__ = ["PollConfig"]
