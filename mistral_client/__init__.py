"""mistral_client package

Python client for the Mistral AI HTTP API.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`MistralClient`
    - Exceptions: :class:`APIError`, :class:`ErrorCode`,
      :class:`MalformedFrameError`, :class:`StreamClosedError`,
      :class:`CancelledError`
    - Streaming: :class:`StreamDecoder`
    - Batch polling: :class:`BatchPoller`, :class:`PollConfig`,
      :class:`PollResult`, :class:`CancellationToken`

Request and response models live in :mod:`mistral_client.models`.
"""

from .config.defaults import SDK_VERSION
from .base.cancellation import CancellationToken, CancelledError
from .base.errors import APIError, ErrorCode, MalformedFrameError, StreamClosedError
from .base.polling import BatchPoller, PollConfig, PollResult
from .base.streaming import StreamDecoder
from .client import MistralClient

__version__ = SDK_VERSION

__all__ = [
    "__version__",
    "MistralClient",
    "APIError",
    "ErrorCode",
    "MalformedFrameError",
    "StreamClosedError",
    "CancelledError",
    "CancellationToken",
    "StreamDecoder",
    "BatchPoller",
    "PollConfig",
    "PollResult",
]
