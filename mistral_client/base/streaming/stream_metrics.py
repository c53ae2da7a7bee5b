"""Streaming metrics data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StreamMetrics:
    """Collected metrics for a single decoded stream.

    emitted: number of messages returned to the caller
    time_to_first_message_ms: latency from decoder creation to first message
    total_duration_ms: latency from decoder creation to its terminal state
    """

    emitted: int = 0
    time_to_first_message_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None


__all__ = ["StreamMetrics"]
