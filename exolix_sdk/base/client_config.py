"""Immutable client configuration.

``ClientConfig`` is created once per client and only read afterwards, so any
number of concurrent calls can share it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import EXOLIX_DEFAULT_BASE_URL
from .cancellation import CancellationToken
from .errors import ConfigurationError
from .http.transport import Transport
from .timeouts import Scheduler


def validate_timeout_ms(timeout_ms: Optional[float]) -> None:
    """Raise ``ConfigurationError`` unless ``timeout_ms`` is None or a number >= 0."""
    if timeout_ms is None:
        return
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, (int, float)):
        raise ConfigurationError(f"timeout_ms must be a number of milliseconds, got {type(timeout_ms).__name__}")
    if timeout_ms < 0:
        raise ConfigurationError("timeout_ms must be a non-negative number of milliseconds")


def normalize_base_url(base_url: Optional[str]) -> str:
    """Return ``base_url`` (or the public default) without trailing slashes."""
    url = (base_url or EXOLIX_DEFAULT_BASE_URL).strip()
    return url.rstrip("/")


@dataclass(frozen=True)
class ClientConfig:
    """Configuration shared by every call of one client.

    Attributes:
        transport: Async callable performing the HTTP I/O. Required.
        base_url: API root; trailing slashes are stripped.
        api_key: Raw key sent as ``Authorization`` when present.
        signal: Default cancellation token applied to every call.
        timeout_ms: Default per-call timeout in milliseconds.
        scheduler: Timer source for timeouts (threading scheduler if None).

    Raises:
        ConfigurationError: when the transport is missing or not callable,
            or the timeout is not a non-negative number.
    """

    transport: Transport
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    signal: Optional[CancellationToken] = None
    timeout_ms: Optional[float] = None
    scheduler: Optional[Scheduler] = None

    def __post_init__(self) -> None:
        if self.transport is None or not callable(self.transport):
            raise ConfigurationError(
                "No transport implementation found. Pass a callable transport "
                "(for example HttpxTransport()) to the client."
            )
        validate_timeout_ms(self.timeout_ms)
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    def __repr__(self) -> str:
        # keep the key out of reprs and logs
        key = "***" if self.api_key else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, api_key={key!r}, "
            f"timeout_ms={self.timeout_ms!r}, transport={type(self.transport).__name__})"
        )


__all__ = ["ClientConfig", "normalize_base_url", "validate_timeout_ms"]
