"""Configuration constants and credential helpers.

Nothing here is read implicitly by the client: ``defaults`` holds constants
and ``env`` holds opt-in helpers for callers that source the API key from
the environment.
"""

from .defaults import EXOLIX_DEFAULT_BASE_URL, TIMEOUT_REASON
from .env import API_KEY_ENV, is_placeholder, resolve_api_key

__all__ = [
    "EXOLIX_DEFAULT_BASE_URL",
    "TIMEOUT_REASON",
    "API_KEY_ENV",
    "is_placeholder",
    "resolve_api_key",
]
