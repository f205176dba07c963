"""Transport contract consumed by the request executor.

A transport is any async callable ``(url, RequestInit) -> TransportResponse``.
It performs the network I/O only: no retries, no status handling. When the
``signal`` in ``RequestInit`` fires while the request is in flight, the
transport raises :class:`~exolix_sdk.base.cancellation.CancelledError`; every
other exception is treated as a transport failure (no response obtained).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

from ..cancellation import CancellationToken


@dataclass(frozen=True)
class RequestInit:
    """Everything a transport needs besides the URL."""

    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    signal: Optional[CancellationToken] = None


class HeaderLookup(Protocol):  # pragma: no cover - structural protocol
    def get(self, name: str, default: Optional[str] = None) -> Optional[str]: ...


class TransportResponse(Protocol):  # pragma: no cover - structural protocol
    @property
    def status(self) -> int: ...

    @property
    def status_text(self) -> str: ...

    @property
    def headers(self) -> HeaderLookup: ...

    async def text(self) -> str: ...


class Transport(Protocol):  # pragma: no cover - structural protocol
    async def __call__(self, url: str, init: RequestInit) -> TransportResponse: ...


__all__ = ["RequestInit", "HeaderLookup", "TransportResponse", "Transport"]
