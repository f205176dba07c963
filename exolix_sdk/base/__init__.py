"""
Client Base Package

Transport-agnostic building blocks of the Exolix client:
- Cancellation: tokens and the signal composer
- HTTP: transport contract, default httpx transport, URL/header builders
- Executor: one request end to end, classified into a response outcome
- Errors: the uniform error shape and its classification helpers
- DTOs: request parameters and response payloads
"""

from .cancellation import (
    NO_CANCELLATION,
    CancellationToken,
    CancelledError,
    EffectiveSignal,
    compose_signals,
)
from .client_config import ClientConfig, normalize_base_url
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorKind,
    ExolixError,
    ValidationError,
)
from .executor import RequestExecutor
from .http import HttpxTransport, RequestInit, Transport, TransportResponse
from .outcome import (
    Cancelled,
    RequestDescriptor,
    ResponseOutcome,
    StructuredError,
    TransportFailure,
    TypedPayload,
)
from .timeouts import Scheduler, ThreadingScheduler, TimerHandle

__all__ = [
    "NO_CANCELLATION",
    "CancellationToken",
    "CancelledError",
    "EffectiveSignal",
    "compose_signals",
    "ClientConfig",
    "normalize_base_url",
    "ConfigurationError",
    "ErrorCode",
    "ErrorKind",
    "ExolixError",
    "ValidationError",
    "RequestExecutor",
    "HttpxTransport",
    "RequestInit",
    "Transport",
    "TransportResponse",
    "Cancelled",
    "RequestDescriptor",
    "ResponseOutcome",
    "StructuredError",
    "TransportFailure",
    "TypedPayload",
    "Scheduler",
    "ThreadingScheduler",
    "TimerHandle",
]
