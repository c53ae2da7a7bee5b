"""Closable line source for streaming responses.

``StreamHandle`` owns the byte source of one streaming response exclusively.
It hands out one decoded text line at a time and releases the source on
``close()``. ``close()`` is idempotent and never raises: a failure while
releasing the connection is logged and swallowed, since the caller has no
way to recover a half-closed socket anyway.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Optional, Union

from ..errors import StreamClosedError
from ..logging import get_logger, log_event

if TYPE_CHECKING:
    import httpx

Line = Union[str, bytes]

_logger = get_logger("mistral_client.stream")


class StreamHandle:
    """Wraps an iterable of lines plus an optional release callback.

    Parameters:
        lines: Iterable producing raw lines (``str`` or UTF-8 ``bytes``).
            ``None`` models a source that was never opened; it reads as an
            empty stream.
        on_close: Callback releasing the underlying connection. Invoked at
            most once.
    """

    def __init__(self, lines: Optional[Iterable[Line]], *, on_close: Optional[Callable[[], None]] = None) -> None:
        self._source: Optional[Iterator[Line]] = iter(lines) if lines is not None else None
        self._on_close = on_close
        self._closed = False

    @classmethod
    def from_response(cls, response: "httpx.Response") -> "StreamHandle":
        """Build a handle over an open ``httpx`` streaming response."""
        return cls(response.iter_lines(), on_close=response.close)

    @property
    def closed(self) -> bool:  # noqa: D401 - short property
        """Whether ``close()`` has been called."""
        return self._closed

    def read_line(self) -> Optional[str]:
        """Return the next line without its line terminator, or ``None`` at EOF.

        Raises:
            StreamClosedError: when called after ``close()``.
        """
        if self._closed:
            raise StreamClosedError()
        if self._source is None:
            return None
        try:
            line = next(self._source)
        except StopIteration:
            return None
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        return line.rstrip("\r\n")

    def close(self) -> None:
        """Release the source. Safe to call any number of times."""
        if self._closed:
            return
        self._closed = True
        source, self._source = self._source, None
        on_close, self._on_close = self._on_close, None
        for release in (getattr(source, "close", None), on_close):
            if release is None:
                continue
            try:
                release()
            except Exception as exc:  # nosec B110 - release failure is logged, never raised
                log_event(_logger, "stream.close_error", level=logging.WARNING, error=repr(exc))

    def __enter__(self) -> "StreamHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["StreamHandle"]
