"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `mistral_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .api_error import APIError
from .malformed_frame_error import MalformedFrameError
from .stream_closed_error import StreamClosedError
from .classification import classify_exception, is_retryable

__all__ = [
    "ErrorCode",
    "APIError",
    "MalformedFrameError",
    "StreamClosedError",
    "classify_exception",
    "is_retryable",
]
