"""Unified error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``mistral_client.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.api_error import APIError
from .errors_parts.malformed_frame_error import MalformedFrameError
from .errors_parts.stream_closed_error import StreamClosedError
from .errors_parts.classification import classify_exception, is_retryable

__all__ = [
    "ErrorCode",
    "APIError",
    "MalformedFrameError",
    "StreamClosedError",
    "classify_exception",
    "is_retryable",
]
