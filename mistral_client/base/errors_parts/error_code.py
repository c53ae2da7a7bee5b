"""Failure categories attached to every ``APIError``.

The string values appear in log events (``error_code``) and are kept stable.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Coarse reason an API call failed."""

    AUTH = "auth"  # 401 / 403
    RATE_LIMIT = "rate_limit"  # 429
    TIMEOUT = "timeout"  # 408 / 504 and client-side timeouts
    TRANSIENT = "transient"  # 502
    VALIDATION = "validation"  # 400 / 422
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"  # 503
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
