"""Per-call request descriptor and response outcomes.

``RequestDescriptor`` describes one call; ``ResponseOutcome`` is the tagged
union the executor classifies it into. Exactly one outcome is produced per
call. ``unwrap()`` turns an outcome into the payload or the uniform
``ExolixError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, NoReturn, Optional, Union

from ..config.defaults import ABORTED_MESSAGE
from .cancellation import CancellationToken
from .errors import ErrorKind, ExolixError


@dataclass(frozen=True)
class RequestDescriptor:
    """One request as described by an endpoint method.

    Attributes:
        path: Path relative to the base URL, starting with ``/``.
        method: HTTP method.
        headers: Header overrides; ``None`` values remove a header.
        query: Query parameters; ``None`` values are dropped.
        body: Serialized JSON body.
        auth: Send ``Authorization``; ``None`` means "if a key is configured".
        signal: Per-call cancellation token.
        timeout_ms: Per-call timeout overriding the client default.
    """

    path: str
    method: str = "GET"
    headers: Mapping[str, Optional[str]] = field(default_factory=dict)
    query: Optional[Mapping[str, Any]] = None
    body: Optional[str] = None
    auth: Optional[bool] = None
    signal: Optional[CancellationToken] = None
    timeout_ms: Optional[float] = None


@dataclass(frozen=True)
class TypedPayload:
    """Successful response; ``data`` is parsed JSON or raw text."""

    data: Any
    status: int = 200

    def unwrap(self) -> Any:
        return self.data


@dataclass(frozen=True)
class StructuredError:
    """Non-success HTTP status."""

    message: str
    status: int
    url: str
    data: Any = None

    def to_error(self) -> ExolixError:
        return ExolixError(self.message, self.status, self.url, self.data, kind=ErrorKind.STRUCTURED)

    def unwrap(self) -> NoReturn:
        raise self.to_error()


@dataclass(frozen=True)
class TransportFailure:
    """No response was obtained."""

    message: str
    url: str

    def to_error(self) -> ExolixError:
        return ExolixError(self.message, 0, self.url, kind=ErrorKind.TRANSPORT)

    def unwrap(self) -> NoReturn:
        raise self.to_error()


@dataclass(frozen=True)
class Cancelled:
    """The effective signal fired before or during the call."""

    url: str
    reason: Optional[str] = None

    def to_error(self) -> ExolixError:
        return ExolixError(ABORTED_MESSAGE, 0, self.url, kind=ErrorKind.CANCELLED, reason=self.reason)

    def unwrap(self) -> NoReturn:
        raise self.to_error()


ResponseOutcome = Union[TypedPayload, StructuredError, TransportFailure, Cancelled]


__all__ = [
    "RequestDescriptor",
    "TypedPayload",
    "StructuredError",
    "TransportFailure",
    "Cancelled",
    "ResponseOutcome",
]
