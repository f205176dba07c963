"""Mutable state behind a ``CancellationToken``.

Holds the cancelled flag, the first reason supplied, and the one-shot
listeners waiting for cancellation. Only ``CancellationToken`` touches it,
always under the token's lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional


Listener = Callable[[Optional[str]], None]


@dataclass
class State:
    """Cancelled flag, reason and pending listeners of a token."""

    cancelled: bool = False
    reason: Optional[str] = None
    listeners: List[Listener] = field(default_factory=list)


__all__ = ["State", "Listener"]
