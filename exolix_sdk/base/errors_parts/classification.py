"""
Helpers mapping failed responses to messages and normalized codes.

Implements the message extraction used for structured errors and the HTTP
status to ``ErrorCode`` mapping. The ``retryable`` hint is advisory only:
nothing in this package retries on its own.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ...config.defaults import REQUEST_FAILED_MESSAGE
from .error_code import ErrorCode

_MESSAGE_FIELDS = ("message", "error", "detail")

_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
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

_RETRYABLE = frozenset(
    {
        ErrorCode.TRANSIENT,
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.NETWORK,
    }
)


def classify_status(status: int) -> ErrorCode:
    """Map an HTTP status to a normalized :class:`ErrorCode`.

    Precedence:
        1. Explicit entries of the status map.
        2. Any other 5xx -> ``SERVER_ERROR``; any other 4xx -> ``VALIDATION``.
        3. ``UNKNOWN`` fallback (including the ``0`` sentinel).
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def extract_error_message(data: Any, status_text: Optional[str] = None) -> str:
    """Pick the most useful message for a failed response.

    Checks ``message``, then ``error``, then ``detail`` of a parsed JSON
    object; falls back to the status text and finally to a generic message.
    Empty strings and ``null`` values are skipped.
    """
    if isinstance(data, dict):
        for key in _MESSAGE_FIELDS:
            value = data.get(key)
            if value:
                return value if isinstance(value, str) else str(value)
    return status_text or REQUEST_FAILED_MESSAGE


def is_retryable(code: ErrorCode) -> bool:
    return code in _RETRYABLE


__all__ = [
    "classify_status",
    "extract_error_message",
    "is_retryable",
    "_HTTP_STATUS_MAP",
]
