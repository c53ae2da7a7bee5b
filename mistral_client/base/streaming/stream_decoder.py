"""Generic decoder for streaming API responses.

``StreamDecoder[T]`` turns the frames of one streaming response into typed
messages. The same class serves every streaming endpoint (chat, agents,
fill-in-the-middle); only the target type differs.

State machine::

    OPEN --(sentinel or EOF)--> EXHAUSTED
    OPEN --(bad frame / read error)--> ERRORED
    any  --close()--> CLOSED

``EXHAUSTED`` keeps reporting exhaustion, ``ERRORED`` keeps re-raising the
recorded error, and ``CLOSED`` raises :class:`StreamClosedError`; none of them
touches the source again. A decoder is single-reader.
"""
from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import MalformedFrameError, StreamClosedError, classify_exception
from ..logging import LogContext, get_logger, normalized_log_event
from .frames import read_frame
from .stream_handle import StreamHandle
from .stream_metrics import StreamMetrics

T = TypeVar("T")


class DecoderState(str, Enum):
    OPEN = "open"
    EXHAUSTED = "exhausted"
    ERRORED = "errored"
    CLOSED = "closed"


class StreamDecoder(Generic[T]):
    """Lazy, single-pass sequence of typed messages read from a stream.

    Parameters:
        handle: The stream handle owning the response body. The decoder takes
            ownership and closes it in ``close()``.
        message_type: Target type of each frame payload. Anything accepted by
            ``pydantic.TypeAdapter`` works (models, ``dict``, ...).
        ctx: Optional logging context (service/model) for terminal events.
        logger: Optional logger override.

    Usage::

        with client.chat.create_stream(request) as stream:
            for chunk in stream:
                ...
    """

    def __init__(
        self,
        handle: StreamHandle,
        message_type: Any,
        *,
        ctx: Optional[LogContext] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._handle = handle
        self._message_type = message_type
        self._adapter: TypeAdapter[T] = TypeAdapter(message_type)
        self._ctx = ctx or LogContext()
        self._logger = logger or get_logger("mistral_client.stream")
        self._state = DecoderState.OPEN
        self._error: Optional[BaseException] = None
        self._finalized = False
        self._t0 = time.perf_counter()
        self.metrics = StreamMetrics()

    @property
    def state(self) -> DecoderState:  # noqa: D401 - short property
        """Current lifecycle state."""
        return self._state

    @property
    def closed(self) -> bool:  # noqa: D401 - short property
        """Whether ``close()`` has been called."""
        return self._state is DecoderState.CLOSED

    # Iteration -------------------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        """Return the next decoded message.

        Raises:
            StopIteration: on the ``[DONE]`` sentinel or when the peer closed
                the stream without one.
            MalformedFrameError: when a frame cannot be decoded into ``T``.
            StreamClosedError: after ``close()``.
        """
        if self._state is DecoderState.CLOSED:
            raise StreamClosedError()
        if self._state is DecoderState.EXHAUSTED:
            raise StopIteration
        if self._state is DecoderState.ERRORED:
            assert self._error is not None  # nosec B101 - state invariant
            raise self._error

        try:
            event = read_frame(self._handle)
        except StreamClosedError:
            # handle closed underneath us
            self._finalize(closed_early=True)
            self._state = DecoderState.CLOSED
            raise
        except Exception as exc:
            self._fail(exc)
            raise

        if event is None or event.terminal:
            self._state = DecoderState.EXHAUSTED
            self._finalize(sentinel=event is not None)
            raise StopIteration

        try:
            message = self._adapter.validate_json(event.data)
        except ValidationError as exc:
            err = MalformedFrameError(
                f"frame payload does not match {self._type_name()}: {exc.errors()[0]['msg']}",
                payload=event.data,
                cause=exc,
            )
            self._fail(err)
            raise err from exc

        self._record_emit()
        return message

    def read(self) -> Optional[T]:
        """Return the next message, or ``None`` once the stream is exhausted."""
        return next(self, None)

    # Lifecycle -------------------------------------------------------------
    def close(self) -> None:
        """Release the underlying source. Idempotent."""
        if self._state is DecoderState.OPEN:
            self._finalize(closed_early=True)
        self._state = DecoderState.CLOSED
        self._handle.close()

    def __enter__(self) -> "StreamDecoder[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Internals -------------------------------------------------------------
    def _type_name(self) -> str:
        return getattr(self._message_type, "__name__", repr(self._message_type))

    def _elapsed_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000.0

    def _record_emit(self) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_message_ms = self._elapsed_ms()
        self.metrics.emitted += 1

    def _fail(self, exc: BaseException) -> None:
        self._state = DecoderState.ERRORED
        self._error = exc
        error_code = "malformed_frame" if isinstance(exc, MalformedFrameError) else classify_exception(exc).value
        self._finalize(error=exc, error_code=error_code)

    def _finalize(
        self,
        *,
        error: Optional[BaseException] = None,
        error_code: Optional[str] = None,
        sentinel: Optional[bool] = None,
        closed_early: Optional[bool] = None,
    ) -> None:
        if self._finalized:
            return
        self._finalized = True
        self.metrics.total_duration_ms = self._elapsed_ms()
        normalized_log_event(
            self._logger,
            "stream.decoder.end" if error is None else "stream.decoder.error",
            self._ctx,
            phase="finalize",
            error_code=error_code,
            emitted=self.metrics.emitted > 0,
            level=logging.INFO if error is None else logging.WARNING,
            emitted_count=self.metrics.emitted,
            time_to_first_message_ms=self.metrics.time_to_first_message_ms,
            total_duration_ms=self.metrics.total_duration_ms,
            sentinel=sentinel,
            closed_early=closed_early,
            error=repr(error) if error is not None else None,
        )


__all__ = ["StreamDecoder", "DecoderState"]
