"""Outcome of a batch poll."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..cancellation import CancelledError

J = TypeVar("J")


@dataclass(frozen=True)
class PollResult(Generic[J]):
    """Result of :meth:`BatchPoller.wait_for_completion`.

    A cancelled poll is an outcome, not a failure: ``cancelled`` is set,
    ``job`` is ``None`` and ``reason`` carries the cancellation cause.

    Attributes:
        job: Final job snapshot when the job completed.
        cancelled: Whether the poll stopped because of cancellation.
        reason: Cancellation reason, if any.
        polls: Number of status fetches issued.
    """

    job: Optional[J] = None
    cancelled: bool = False
    reason: Optional[str] = None
    polls: int = 0

    @property
    def completed(self) -> bool:
        return self.job is not None and not self.cancelled

    def unwrap(self) -> J:
        """Return the completed job or raise :class:`CancelledError`."""
        if self.cancelled or self.job is None:
            raise CancelledError(self.reason or "operation cancelled")
        return self.job


__all__ = ["PollResult"]
