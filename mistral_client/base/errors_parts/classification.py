"""Turning HTTP statuses and exceptions into :class:`ErrorCode` values."""
from __future__ import annotations

from typing import Dict, FrozenSet, Optional

import httpx

from .api_error import APIError
from .error_code import ErrorCode

_STATUS_CODES: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_RETRY_HINT: FrozenSet[ErrorCode] = frozenset(
    {ErrorCode.RATE_LIMIT, ErrorCode.TRANSIENT, ErrorCode.UNAVAILABLE, ErrorCode.TIMEOUT}
)


def _valid_status(value: object) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and 100 <= value <= 599:
        return value
    return None


def _status_of(exc: object) -> Optional[int]:
    """Find an HTTP status on ``exc`` itself or on its ``response``."""
    for holder, attr in ((exc, "status_code"), (exc, "status"), (getattr(exc, "response", None), "status_code")):
        status = _valid_status(getattr(holder, attr, None))
        if status is not None:
            return status
    return None


def classify_status(status: int) -> ErrorCode:
    """Return the code for ``status``.

    Statuses missing from the table fall back by class: 4xx is
    ``VALIDATION``, 5xx is ``SERVER_ERROR``, everything else ``UNKNOWN``.
    """
    code = _STATUS_CODES.get(status)
    if code is not None:
        return code
    if 400 <= status <= 499:
        return ErrorCode.VALIDATION
    if 500 <= status <= 599:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: object) -> ErrorCode:
    """Return the code for an arbitrary exception.

    An ``APIError`` keeps its own code and timeouts (builtin or ``httpx``)
    are ``TIMEOUT``. Otherwise a status found on the exception decides.
    """
    if isinstance(exc, APIError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = _status_of(exc)
    return classify_status(status) if status is not None else ErrorCode.UNKNOWN


def is_retryable(code: ErrorCode) -> bool:
    """Whether a request failing with ``code`` may succeed when repeated."""
    return code in _RETRY_HINT


__all__ = ["classify_exception", "classify_status", "is_retryable"]
