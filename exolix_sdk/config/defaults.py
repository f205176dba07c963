"""exolix_sdk.config.defaults
==========================

Central place for small, stable default values used across the exolix_sdk
package. Only plain constants live here (no I/O, no imports from other
exolix_sdk modules) so any layer can import them without cycles.
"""

from __future__ import annotations

# ---- API ----
# Public Exolix v2 REST root; overridable per client via ``base_url``.
EXOLIX_DEFAULT_BASE_URL = "https://exolix.com/api/v2"

# Headers sent with every request.
DEFAULT_ACCEPT = "application/json"
DEFAULT_CONTENT_TYPE = "application/json"
# The API expects the raw key in Authorization (no "Bearer" scheme).
AUTHORIZATION_HEADER = "Authorization"


# ---- Cancellation ----
# Reason attached to the effective signal when a request timeout elapses.
TIMEOUT_REASON = "request timed out"
# Message of the error raised for cancelled requests.
ABORTED_MESSAGE = "The request was aborted"


# ---- Error messages ----
# Used when a failed response carries no message and no status text.
REQUEST_FAILED_MESSAGE = "Request failed"
# Used when a transport failure carries no message.
UNKNOWN_NETWORK_ERROR_MESSAGE = "Unknown network error"


# ---- Logging ----
BASE_LOGGER_NAME = "exolix"
LOG_LEVEL_ENV = "EXOLIX_LOG_LEVEL"


__all__ = [
    "EXOLIX_DEFAULT_BASE_URL",
    "DEFAULT_ACCEPT",
    "DEFAULT_CONTENT_TYPE",
    "AUTHORIZATION_HEADER",
    "TIMEOUT_REASON",
    "ABORTED_MESSAGE",
    "REQUEST_FAILED_MESSAGE",
    "UNKNOWN_NETWORK_ERROR_MESSAGE",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
