"""
Normalized error codes and error kinds.

``ErrorKind`` says *where* a failure happened (the response classification
of the executor); ``ErrorCode`` says *what* went wrong, derived from the HTTP
status where one exists. Values are lowercase snake_case and are a stable
public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Origin of an ``ExolixError``."""

    VALIDATION = "validation"
    STRUCTURED = "structured"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"
    DECODE = "decode"


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    NETWORK = "network"
    DECODE = "decode"
    UNKNOWN = "unknown"


__all__ = ["ErrorKind", "ErrorCode"]
