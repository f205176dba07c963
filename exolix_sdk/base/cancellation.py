"""Cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs via the canonical
``exolix_sdk.base.cancellation`` import path while the implementations live
under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is the signal object transports observe.
- ``compose_signals`` merges per-call, default and timeout sources into the
  ``EffectiveSignal`` of one call.
- ``CancelledError`` is the marker transports raise for aborted requests.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.effective_signal import (
    NO_CANCELLATION,
    EffectiveSignal,
    compose_signals,
)

__all__ = [
    "CancellationToken",
    "CancelledError",
    "EffectiveSignal",
    "NO_CANCELLATION",
    "compose_signals",
]
