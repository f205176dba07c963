"""Composition of cancellation sources into one effective signal.

``compose_signals`` merges the per-call token, the client default token and
an optional timeout into the single token handed to the transport. The
result is an ``EffectiveSignal``: the token plus the timer handle and
upstream listener removers that only the caller may release.

Composition rules
-----------------
- No timeout, no tokens: :data:`NO_CANCELLATION`; no timer is allocated.
- No timeout, one token: that token is used as-is.
- No timeout, several tokens: a fresh token cancelled by whichever input
  fires first, with its reason.
- Timeout: always a fresh token and a timer that cancels it with
  ``"request timed out"``. Inputs forward their cancellation into it;
  inputs already cancelled cancel it synchronously, before the timer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from ...config.defaults import TIMEOUT_REASON
from ..timeouts import Scheduler, TimerHandle, get_default_scheduler
from .cancellation_token import CancellationToken


@dataclass(frozen=True)
class EffectiveSignal:
    """The merged cancellation signal of one in-flight call.

    Attributes:
        token: Token passed to the transport, or ``None`` for an unbounded
            call that can never be cancelled.
        timer: Timeout timer backing ``token``, if a timeout was configured.
    """

    token: Optional[CancellationToken] = None
    timer: Optional[TimerHandle] = None
    _detach: Tuple[Callable[[], None], ...] = field(default=(), repr=False)

    @property
    def cancelled(self) -> bool:
        return self.token is not None and self.token.cancelled

    @property
    def reason(self) -> Optional[str]:
        return self.token.reason if self.token is not None else None

    def release(self) -> None:
        """Cancel the timer and stop listening to upstream tokens.

        Never called by the composer. The owning call invokes it once when
        it settles, whatever the outcome.
        """
        if self.timer is not None:
            self.timer.cancel()
        for detach in self._detach:
            detach()


NO_CANCELLATION = EffectiveSignal()


def _unique(signals: Iterable[Optional[CancellationToken]]) -> List[CancellationToken]:
    out: List[CancellationToken] = []
    for s in signals:
        if s is not None and not any(s is seen for seen in out):
            out.append(s)
    return out


def _forward(upstream: List[CancellationToken], target: CancellationToken) -> Tuple[Callable[[], None], ...]:
    return tuple(s.add_listener(target.cancel) for s in upstream)


def compose_signals(
    signals: Iterable[Optional[CancellationToken]] = (),
    timeout_ms: Optional[float] = None,
    scheduler: Optional[Scheduler] = None,
) -> EffectiveSignal:
    """Merge upstream tokens and an optional timeout into one signal.

    Parameters:
        signals: Ordered upstream tokens; ``None`` entries are ignored and
            the same token supplied twice is only wired once.
        timeout_ms: Timeout in milliseconds. ``None`` or a non-positive
            value means no timeout.
        scheduler: Timer source; defaults to the shared threading scheduler.

    Returns:
        An :class:`EffectiveSignal` whose ``release()`` the caller must
        invoke after the call settles.
    """
    upstream = _unique(signals)
    if timeout_ms is None or timeout_ms <= 0:
        if not upstream:
            return NO_CANCELLATION
        if len(upstream) == 1:
            return EffectiveSignal(token=upstream[0])
        token = CancellationToken()
        return EffectiveSignal(token=token, _detach=_forward(upstream, token))

    token = CancellationToken()
    detach = _forward(upstream, token)
    timer = (scheduler or get_default_scheduler()).schedule(
        timeout_ms, lambda: token.cancel(TIMEOUT_REASON)
    )
    return EffectiveSignal(token=token, timer=timer, _detach=detach)


__all__ = ["EffectiveSignal", "NO_CANCELLATION", "compose_signals"]
