"""Architecture enforcement tests for the layering of ``exolix_sdk``.

This module provides lightweight, repository-local invariants to ensure
that the ``exolix_sdk.base`` package (executor, cancellation, transport,
DTOs) remains decoupled from the endpoint layer and from ``httpx`` outside
its one adapter module.

Rules validated here:
1) ``exolix_sdk.base`` must not import ``exolix_sdk.client`` or
   ``exolix_sdk.validation``.
2) Only ``base/http/httpx_transport.py`` may import ``httpx``.
3) ``exolix_sdk.config`` must not import anything else from the package.

These tests are static-file scans to avoid import-time side effects, and
they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE = REPO_ROOT / "exolix_sdk"


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under a root directory.

    Parameters
    ----------
    root: Path
        The directory to scan recursively.

    Yields
    ------
    Path
        Paths to ``.py`` files under ``root``, skipping ``__pycache__`` and
        test modules.
    """

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _offenders(root: Path, forbidden: List[str], allow: Iterable[Path] = ()) -> List[str]:
    allowed = {p.resolve() for p in allow}
    found: List[str] = []
    for py in _iter_python_files(root):
        if py.resolve() in allowed:
            continue
        src = _read_text(py)
        found.extend(f"{py.relative_to(REPO_ROOT)}: contains '{m}'" for m in forbidden if m in src)
    return found


def _require(path: Path) -> Path:
    if not path.is_dir():
        pytest.skip(f"{path} not found; skipping boundary check")
    return path


def test_base_does_not_import_endpoint_layer() -> None:
    """The executor layer must stay usable without the endpoint client."""

    base = _require(PACKAGE / "base")
    offenders = _offenders(
        base,
        [
            "from exolix_sdk.client",
            "import exolix_sdk.client",
            "from exolix_sdk.validation",
            "from ..client",
            "from ..validation",
            "from ...client",
        ],
    )
    if offenders:
        pytest.fail("exolix_sdk.base must not import the endpoint layer.\n" + "\n".join(offenders))


def test_httpx_is_confined_to_its_adapter() -> None:
    offenders = _offenders(
        _require(PACKAGE),
        ["import httpx", "from httpx"],
        allow=[PACKAGE / "base" / "http" / "httpx_transport.py"],
    )
    if offenders:
        pytest.fail("httpx may only be imported by the default transport adapter.\n" + "\n".join(offenders))


def test_config_is_a_leaf_package() -> None:
    offenders = _offenders(
        _require(PACKAGE / "config"),
        ["from exolix_sdk", "import exolix_sdk", "from ..base", "from ..client"],
    )
    if offenders:
        pytest.fail("exolix_sdk.config must not import other package modules.\n" + "\n".join(offenders))
