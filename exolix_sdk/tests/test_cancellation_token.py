"""Unit tests for ``CancellationToken``.

Covers:
- First reason wins; repeated cancel is ignored.
- Listeners run once, synchronously when already cancelled, and can be removed.
- Parent cancellation cascades to children.
- ``wait()`` resolves when a timer thread cancels the token.
"""
from __future__ import annotations

import asyncio
import threading

import pytest

from exolix_sdk.base.cancellation import CancellationToken, CancelledError


def test_first_reason_wins():
    token = CancellationToken()
    token.cancel("first")
    token.cancel("second")
    assert token.cancelled  # nosec B101 - asserts are appropriate in unit tests
    assert token.reason == "first"  # nosec B101


def test_listener_runs_once_with_reason():
    token = CancellationToken()
    seen = []
    token.add_listener(seen.append)
    token.cancel("stop")
    token.cancel("again")
    assert seen == ["stop"]  # nosec B101


def test_listener_on_cancelled_token_runs_immediately():
    token = CancellationToken()
    token.cancel("done")
    seen = []
    remove = token.add_listener(seen.append)
    assert seen == ["done"]  # nosec B101
    remove()  # no-op, must not raise


def test_removed_listener_is_not_called():
    token = CancellationToken()
    seen = []
    remove = token.add_listener(seen.append)
    remove()
    remove()
    token.cancel("x")
    assert seen == []  # nosec B101


def test_child_inherits_cancellation():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("parent stop")
    assert child.cancelled  # nosec B101
    assert child.reason == "parent stop"  # nosec B101

    late = CancellationToken(parent=parent)
    assert late.cancelled  # nosec B101


def test_raise_if_cancelled_carries_reason():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("user aborted")
    with pytest.raises(CancelledError) as info:
        token.raise_if_cancelled()
    assert info.value.reason == "user aborted"  # nosec B101


def test_wait_resolves_from_another_thread():
    token = CancellationToken()

    async def main():
        timer = threading.Timer(0.01, token.cancel, args=("from thread",))
        timer.start()
        try:
            return await asyncio.wait_for(token.wait(), timeout=2)
        finally:
            timer.cancel()

    assert asyncio.run(main()) == "from thread"  # nosec B101


def test_wait_returns_immediately_when_already_cancelled():
    token = CancellationToken()
    token.cancel("early")
    assert asyncio.run(asyncio.wait_for(token.wait(), timeout=1)) == "early"  # nosec B101
