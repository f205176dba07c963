"""URL and query string helpers."""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode


def _stringify(value: Any) -> str:
    # the API expects JSON-style booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """Encode ``params`` as a ``?``-prefixed query string.

    Entries whose value is ``None`` are dropped; other values are
    stringified and percent-encoded in mapping order. Returns ``""`` when
    nothing is left, so callers can append the result unconditionally.
    """
    if not params:
        return ""
    pairs = [(str(k), _stringify(v)) for k, v in params.items() if v is not None]
    encoded = urlencode(pairs)
    return f"?{encoded}" if encoded else ""


def quote_segment(value: str) -> str:
    """Percent-encode a single path segment (``/`` included)."""
    return quote(str(value), safe="")


def join_url(base_url: str, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    return f"{base_url}{path}{build_query(params)}"


__all__ = ["build_query", "quote_segment", "join_url"]
