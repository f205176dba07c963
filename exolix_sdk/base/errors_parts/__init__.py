"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `exolix_sdk.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, ErrorKind
from .exolix_error import ExolixError
from .validation_error import ValidationError
from .configuration_error import ConfigurationError
from .classification import classify_status, extract_error_message, is_retryable

__all__ = [
    "ErrorCode",
    "ErrorKind",
    "ExolixError",
    "ValidationError",
    "ConfigurationError",
    "classify_status",
    "extract_error_message",
    "is_retryable",
]
