"""Per-request overrides accepted by every endpoint method."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..cancellation import CancellationToken


@dataclass(frozen=True)
class RequestOptions:
    """Overrides for a single call.

    Attributes:
        headers: Extra headers, applied last; ``None`` values remove one.
        signal: Cancellation token combined with the client default.
        timeout_ms: Timeout replacing the client default for this call.
        auth: ``False`` suppresses ``Authorization`` for this call.
    """

    headers: Optional[Mapping[str, Optional[str]]] = None
    signal: Optional[CancellationToken] = None
    timeout_ms: Optional[float] = None
    auth: Optional[bool] = None


__all__ = ["RequestOptions"]
