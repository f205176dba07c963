"""
Uniform error type surfaced by the client.

Every network-originated failure (structured error response, transport
failure, cancellation) and every payload that cannot be narrowed reaches the
caller as an ``ExolixError``. Callers branch on ``kind``, ``status`` and
``code`` for their own retry decisions.
"""
from __future__ import annotations

from typing import Any, Optional

from ...config.defaults import TIMEOUT_REASON
from .classification import classify_status, is_retryable
from .error_code import ErrorCode, ErrorKind


class ExolixError(Exception):
    """Represents a normalized client error.

    Attributes:
        message: Human-readable message (server-provided where available).
        status: HTTP status, or ``0`` when no response was obtained.
        url: Full request URL.
        data: Parsed JSON or raw text body of the failed response.
        kind: Where the failure was classified (:class:`ErrorKind`).
        reason: Cancellation reason for cancelled calls
            (e.g. ``"request timed out"``).
        code: Normalized :class:`ErrorCode`.
        retryable: Hint for caller retry logic (not authoritative).
    """

    def __init__(
        self,
        message: str,
        status: int = 0,
        url: str = "",
        data: Any = None,
        *,
        kind: ErrorKind = ErrorKind.STRUCTURED,
        reason: Optional[str] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url
        self.data = data
        self.kind = kind
        self.reason = reason
        self.code = code if code is not None else self._default_code(kind, status)
        self.retryable = is_retryable(self.code)

    @staticmethod
    def _default_code(kind: ErrorKind, status: int) -> ErrorCode:
        if kind is ErrorKind.CANCELLED:
            return ErrorCode.CANCELLED
        if kind is ErrorKind.TRANSPORT:
            return ErrorCode.NETWORK
        if kind is ErrorKind.DECODE:
            return ErrorCode.DECODE
        if kind is ErrorKind.VALIDATION:
            return ErrorCode.VALIDATION
        return classify_status(status)

    @property
    def timed_out(self) -> bool:
        """True when a cancellation was caused by the request timeout."""
        return self.kind is ErrorKind.CANCELLED and self.reason == TIMEOUT_REASON

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"ExolixError(kind={self.kind.value!r}, status={self.status}, "
            f"code={self.code.value!r}, message={self.message!r}, url={self.url!r})"
        )


__all__ = ["ExolixError"]
