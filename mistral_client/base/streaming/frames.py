"""Frame reader for streaming responses.

Two line framings are understood:

* JSON envelope lines: ``{"data": "<payload>"}``, one frame per line.
* Server-sent events: ``data: <payload>`` lines. Consecutive ``data`` lines
  are joined with ``\\n``; the frame ends at a blank line or at end of stream.
  Comment lines (leading ``:``) and the ``event``, ``id`` and ``retry`` fields
  are skipped.

Only the lines of the frame being returned are consumed from the handle.
"""
from __future__ import annotations

import json
from typing import List, Optional, Tuple

from ..errors import MalformedFrameError
from .stream_event import StreamEvent
from .stream_handle import StreamHandle

_SSE_FIELDS = ("data", "event", "id", "retry")


def _split_sse_field(line: str) -> Tuple[str, str]:
    field, _, value = line.partition(":")
    if value.startswith(" "):
        value = value[1:]
    return field, value


def _is_sse_line(line: str) -> bool:
    field, sep, _ = line.partition(":")
    return bool(sep) and field in _SSE_FIELDS


def _envelope_data(line: str) -> str:
    """Extract the ``data`` string from a JSON envelope line."""
    try:
        envelope = json.loads(line)
    except json.JSONDecodeError as exc:
        raise MalformedFrameError(f"frame is not valid JSON: {exc.msg}", payload=line, cause=exc) from exc
    if not isinstance(envelope, dict):
        raise MalformedFrameError("frame is not a JSON object", payload=line)
    data = envelope.get("data")
    if not isinstance(data, str):
        raise MalformedFrameError("frame has no string 'data' field", payload=line)
    return data


def read_frame(handle: StreamHandle) -> Optional[StreamEvent]:
    """Read the next frame from ``handle``.

    Returns:
        The next :class:`StreamEvent`, or ``None`` when the source ended
        without producing another frame.

    Raises:
        MalformedFrameError: for an envelope line that cannot be decoded.
        StreamClosedError: when the handle is already closed.
    """
    data_lines: List[str] = []
    while True:
        line = handle.read_line()
        if line is None:
            break
        if not line.strip():
            if data_lines:
                break
            continue
        if line.startswith(":"):
            continue
        if data_lines or _is_sse_line(line):
            field, value = _split_sse_field(line)
            if field == "data":
                data_lines.append(value)
            continue
        return StreamEvent.from_data(_envelope_data(line))
    if not data_lines:
        return None
    return StreamEvent.from_data("\n".join(data_lines))


__all__ = ["read_frame"]
