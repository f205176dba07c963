"""Pytest configuration for the client test suite.

Fixtures hand out the doubles from ``exolix_sdk.tests.doubles`` and keep
request logging quiet unless a test opts in.
"""

from __future__ import annotations

import pytest

from exolix_sdk.tests.doubles import CountingScheduler, FakeTransport


@pytest.fixture()
def scheduler() -> CountingScheduler:
    return CountingScheduler()


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep request events out of test output unless a test opts in."""
    monkeypatch.setenv("EXOLIX_LOG_LEVEL", "ERROR")
