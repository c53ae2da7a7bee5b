"""``CancelledError``: the exception form of a fired cancellation token."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """An operation stopped because its token was cancelled.

    Not an ``APIError``: nothing failed remotely and retrying is pointless.
    """


__all__ = ["CancelledError"]
