"""
Construction-time configuration error.

Raised by the client constructor when its configuration cannot be used, most
notably when no callable transport is available.
"""
from __future__ import annotations


class ConfigurationError(RuntimeError):
    """The client cannot be constructed with the supplied options."""


__all__ = ["ConfigurationError"]
