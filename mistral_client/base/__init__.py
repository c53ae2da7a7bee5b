"""
SDK Base Package

Resource-agnostic building blocks shared by every service:

- Cancellation: cooperative tokens with interruptible waits
- Errors: normalized error codes and the structured ``APIError``
- Logging: JSON structured logging with contextual fields
- Timeouts: centralized HTTP and stream timeouts
- HTTP: pooled clients and the authenticated transport
- Streaming: frame reader and the generic typed decoder
- Polling: the batch completion poller
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIError,
    ErrorCode,
    MalformedFrameError,
    StreamClosedError,
    classify_exception,
    is_retryable,
)
from .logging import LogContext, configure_logger, get_logger, log_event, normalized_log_event
from .timeouts import TimeoutConfig, get_timeout_config
from .http import Transport, close_all_clients, get_httpx_client
from .streaming import StreamDecoder, StreamEvent, StreamHandle, StreamMetrics, read_frame
from .polling import BatchPoller, PollConfig, PollResult

__all__ = [
    "CancellationToken",
    "CancelledError",
    "APIError",
    "ErrorCode",
    "MalformedFrameError",
    "StreamClosedError",
    "classify_exception",
    "is_retryable",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "TimeoutConfig",
    "get_timeout_config",
    "Transport",
    "close_all_clients",
    "get_httpx_client",
    "StreamDecoder",
    "StreamEvent",
    "StreamHandle",
    "StreamMetrics",
    "read_frame",
    "BatchPoller",
    "PollConfig",
    "PollResult",
]
