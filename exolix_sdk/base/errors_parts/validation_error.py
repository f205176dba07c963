"""
Local validation error.

Raised by endpoint methods before any signal, timer or network activity when
required parameters are missing or empty. Subclasses ``ValueError`` as well
so plain ``except ValueError`` call sites keep working.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorKind
from .exolix_error import ExolixError


class ValidationError(ExolixError, ValueError):
    """Caller-supplied parameters are missing, empty or malformed."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message, kind=ErrorKind.VALIDATION)
        self.field = field


__all__ = ["ValidationError"]
