"""Streaming package.

Exposes the stream handle, frame reader and the generic typed decoder used
by every streaming endpoint.
"""

from .stream_event import StreamEvent, DONE_SENTINEL
from .stream_handle import StreamHandle
from .frames import read_frame
from .stream_metrics import StreamMetrics
from .stream_decoder import StreamDecoder, DecoderState

__all__ = [
    "StreamEvent",
    "DONE_SENTINEL",
    "StreamHandle",
    "read_frame",
    "StreamMetrics",
    "StreamDecoder",
    "DecoderState",
]
