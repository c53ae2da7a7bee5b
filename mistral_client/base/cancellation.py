"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``mistral_client.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` signals cancellation to the batch poller and any other
  long-running loop. Its ``wait`` method doubles as the interruptible sleep
  used between status checks.
- ``CancelledError`` is raised by callers that prefer an exception over a
  cancelled outcome (see ``PollResult.unwrap``).
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
