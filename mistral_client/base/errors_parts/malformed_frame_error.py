"""Error raised when a stream frame cannot be decoded."""
from __future__ import annotations

from typing import Optional


class MalformedFrameError(ValueError):
    """A stream frame's payload is not valid JSON for the expected type.

    Non-retryable. The decoder that raised it is left unusable and should be
    closed by the caller.

    Attributes:
        payload: The offending frame text (line or joined ``data`` payload).
        cause: The underlying JSON or validation error, when available.
    """

    def __init__(self, message: str, *, payload: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.payload = payload
        self.cause = cause


__all__ = ["MalformedFrameError"]
