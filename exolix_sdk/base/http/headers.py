"""Request header construction."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ...config.defaults import AUTHORIZATION_HEADER, DEFAULT_ACCEPT, DEFAULT_CONTENT_TYPE


def build_headers(
    api_key: Optional[str],
    overrides: Optional[Mapping[str, Optional[str]]] = None,
    auth: Optional[bool] = None,
) -> Dict[str, str]:
    """Return the final header set of a request.

    Defaults are ``Accept`` and ``Content-Type`` set to JSON, plus
    ``Authorization`` carrying the raw API key when ``auth`` is not ``False``
    and a key is configured. ``overrides`` are applied last: a key matching
    an existing header case-insensitively replaces it, and a ``None`` value
    removes it. Each header name therefore appears once.
    """
    headers: Dict[str, str] = {
        "Accept": DEFAULT_ACCEPT,
        "Content-Type": DEFAULT_CONTENT_TYPE,
    }
    if (auth is None or auth) and api_key:
        headers[AUTHORIZATION_HEADER] = api_key
    for key, value in (overrides or {}).items():
        for existing in [k for k in headers if k.lower() == key.lower()]:
            del headers[existing]
        if value is not None:
            headers[key] = value
    return headers


__all__ = ["build_headers"]
