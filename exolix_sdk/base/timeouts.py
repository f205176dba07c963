"""Timer primitives backing request timeouts.

The cancellation composer never sleeps itself; it asks a ``Scheduler`` to
run a callback after a delay and receives a ``TimerHandle`` it hands back to
the caller. Whoever owns the call releases the handle once the call settles.

Key Components
--------------
TimerHandle
    Structural protocol: ``cancel()`` releases a scheduled timer. Cancelling
    a timer that already fired (or was already cancelled) is a no-op.

Scheduler
    Structural protocol: ``schedule(delay_ms, callback) -> TimerHandle``.
    Tests substitute an instrumented double to count allocations and
    releases.

ThreadingScheduler
    Default implementation built on daemon ``threading.Timer`` objects, so
    timeouts fire even while the event loop is blocked inside a transport.

Failure Modes
-------------
Callbacks run on the timer thread. They must be thread-safe; the
``CancellationToken`` they normally cancel is.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):  # pragma: no cover - structural protocol
    def cancel(self) -> None: ...


class Scheduler(Protocol):  # pragma: no cover - structural protocol
    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingTimerHandle:
    """Handle wrapping a started ``threading.Timer``."""

    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    @property
    def active(self) -> bool:
        return self._timer.is_alive() and not self._timer.finished.is_set()

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler:
    """Schedule callbacks on daemon ``threading.Timer`` threads."""

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> ThreadingTimerHandle:
        timer = threading.Timer(max(0.0, delay_ms) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return ThreadingTimerHandle(timer)


_DEFAULT_SCHEDULER: Optional[ThreadingScheduler] = None


def get_default_scheduler() -> ThreadingScheduler:
    """Return the process-wide ``ThreadingScheduler`` (created lazily)."""
    global _DEFAULT_SCHEDULER  # noqa: PLW0603 - documented module cache
    if _DEFAULT_SCHEDULER is None:
        _DEFAULT_SCHEDULER = ThreadingScheduler()
    return _DEFAULT_SCHEDULER


__all__ = [
    "TimerHandle",
    "Scheduler",
    "ThreadingTimerHandle",
    "ThreadingScheduler",
    "get_default_scheduler",
]
