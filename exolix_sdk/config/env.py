"""exolix_sdk.config.env
=====================

Opt-in helpers for sourcing the Exolix API key from the process environment.

Purpose
-------
The client never reads the environment on its own; credential sourcing is
the caller's job. These helpers give callers one consistent way to do it::

    key, _ = resolve_api_key()
    client = Exolix(api_key=key)

Design Notes
------------
- ``EXOLIX_API_KEY`` is canonical; aliases in ``ENV_ALIASES`` are tried
  after it, in order.
- Placeholder values (``changeme``, ``example`` ...) are ignored so a
  template ``.env`` never ships a bogus key.

Failure Modes
-------------
- Functions return ``None`` when nothing usable is set; they never raise.
"""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, Tuple

API_KEY_ENV = "EXOLIX_API_KEY"

ENV_ALIASES: Tuple[str, ...] = ("EXOLIX_KEY",)


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', 'your_api_key',
    or starts with 'test_'. Case-insensitive, surrounding spaces ignored.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or "your_api_key" in v
        or v.startswith("test_")
    )


def get_env_var_candidates() -> Iterable[str]:
    """Yield acceptable environment variable names, canonical first."""
    yield API_KEY_ENV
    for alias in ENV_ALIASES:
        if alias != API_KEY_ENV:
            yield alias


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key from the environment.

    Parameters
    ----------
    environ: Optional[Mapping[str, str]]
        Mapping to read instead of ``os.environ`` (useful in tests).

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        value; ``(None, None)`` when nothing is set.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates():
        val = (env.get(name) or "").strip()
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "API_KEY_ENV",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_api_key",
]
