"""Cancellation parts package (token, error, composer).

Prefer importing from ``exolix_sdk.base.cancellation`` for the stable surface.
"""

from .cancelled_error import CancelledError
from .cancellation_token import CancellationToken
from .effective_signal import NO_CANCELLATION, EffectiveSignal, compose_signals

__all__ = [
    "CancelledError",
    "CancellationToken",
    "EffectiveSignal",
    "NO_CANCELLATION",
    "compose_signals",
]
