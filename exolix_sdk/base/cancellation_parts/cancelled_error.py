"""Cancellation error type.

``CancelledError`` is the marker transports raise when the effective signal
aborted an in-flight request. The executor recognizes it and classifies the
call as cancelled rather than as a transport failure.
"""

from __future__ import annotations

from typing import Optional


class CancelledError(RuntimeError):
    """Raised when a request observes a cancellation request.

    Attributes:
        reason: Reason attached to the token that fired, when known
            (for example ``"request timed out"``).
    """

    def __init__(self, reason: Optional[str] = None) -> None:
        super().__init__(reason or "operation cancelled")
        self.reason = reason


__all__ = ["CancelledError"]
