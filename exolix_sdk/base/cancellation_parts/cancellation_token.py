"""Cancellation token implementation.

Exposes the ``CancellationToken`` class passed to transports as the request
signal. A token can be polled (``cancelled``), observed through one-shot
listeners, awaited from a coroutine, and cascaded to child tokens.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from threading import Lock
from typing import Callable, List, Optional

from ..logging import get_logger, log_event
from .state import Listener, State
from .cancelled_error import CancelledError


def _noop() -> None:
    return None


class CancellationToken:
    """A thread-safe cancellation token with optional cascading semantics.

    The first call to :meth:`cancel` wins: its reason is recorded and every
    registered listener runs once with that reason. Later calls are ignored.
    Child tokens inherit cancellation when the parent is cancelled.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> Optional[str]:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cancellation, notify listeners, cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            listeners = list(self._state.listeners)
            self._state.listeners.clear()
            children = list(self._children)
        for listener in listeners:
            self._notify(listener, reason)
        for child in children:
            self._notify(child.cancel, reason)

    @staticmethod
    def _notify(callback: Listener, reason: Optional[str]) -> None:
        # listener failures are logged, never raised
        try:
            callback(reason)
        except Exception as exc:  # noqa: BLE001 - listener boundary
            log_event(
                get_logger("exolix.cancellation"),
                "cancellation.listener_error",
                level=logging.ERROR,
                error=repr(exc),
                reason=reason,
            )

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Register a one-shot listener and return a function that removes it.

        If the token is already cancelled the listener runs immediately on
        the calling thread and the returned remover does nothing.
        """
        with self._lock:
            fired = self._state.cancelled
            if not fired:
                self._state.listeners.append(listener)
        if fired:
            listener(self._state.reason)
            return _noop

        def remove() -> None:
            with self._lock, suppress(ValueError):
                self._state.listeners.remove(listener)

        return remove

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason)

    async def wait(self) -> Optional[str]:
        """Suspend until the token is cancelled and return its reason.

        Safe to combine with timers firing on other threads: the listener
        hops back onto the awaiting loop via ``call_soon_threadsafe``.
        """
        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[Optional[str]] = loop.create_future()

        def _resolve(reason: Optional[str]) -> None:
            if not waiter.done():
                waiter.set_result(reason)

        def _on_cancel(reason: Optional[str]) -> None:
            # loop may already be closed when a late timer fires
            with suppress(RuntimeError):
                loop.call_soon_threadsafe(_resolve, reason)

        remove = self.add_listener(_on_cancel)
        try:
            return await waiter
        finally:
            remove()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
