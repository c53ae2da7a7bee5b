"""Error raised when reading from a closed stream."""
from __future__ import annotations


class StreamClosedError(RuntimeError):
    """An operation was attempted on a stream after ``close()``.

    Always a programming error on the caller's side; raised instead of
    attempting a read on a released connection.
    """

    def __init__(self, message: str = "stream is closed") -> None:
        super().__init__(message)


__all__ = ["StreamClosedError"]
