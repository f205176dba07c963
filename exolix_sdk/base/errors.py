"""Client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``exolix_sdk.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode, ErrorKind
from .errors_parts.exolix_error import ExolixError
from .errors_parts.validation_error import ValidationError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.classification import classify_status, extract_error_message, is_retryable

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
