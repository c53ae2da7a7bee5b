"""
Structured API error exception type.

Raised for non-2xx HTTP responses and for client construction failures that
the API itself would reject (missing credentials).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class APIError(Exception):
    """Represents a failed API call with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Server supplied message (``message`` field of the JSON error
            body) or the raw body text when the body is not JSON.
        status_code: HTTP status of the response, ``None`` when no request
            was sent.
        method: HTTP method of the failed request.
        url: Full URL of the failed request.
        retryable: Hint for upstream retry logic (not authoritative; this
            SDK never retries ordinary calls).
        raw: Response body or underlying exception, for diagnostics.
    """

    code: ErrorCode
    message: str
    status_code: Optional[int] = None
    method: Optional[str] = None
    url: Optional[str] = None
    retryable: bool = False
    raw: Optional[object] = None

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.code.value}: {self.message}"
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


__all__ = ["APIError"]
