"""Stream event primitive.

One decoded unit from the wire: the raw ``data`` payload of a frame plus a
flag telling whether it is the end-of-stream sentinel.
"""
from __future__ import annotations

from dataclasses import dataclass

DONE_SENTINEL = "[DONE]"


@dataclass(frozen=True)
class StreamEvent:
    """A single frame payload read from a streaming response.

    Fields:
      data: raw payload text (a JSON document or the sentinel)
      terminal: True when ``data`` is the ``[DONE]`` sentinel
    """

    data: str
    terminal: bool = False

    @classmethod
    def from_data(cls, data: str) -> "StreamEvent":
        return cls(data=data, terminal=data == DONE_SENTINEL)


__all__ = ["StreamEvent", "DONE_SENTINEL"]
