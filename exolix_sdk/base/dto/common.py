"""
Shared Pydantic base classes for Exolix payloads.

Design
------
- Python attributes are snake_case; the wire format is camelCase. Aliases are
  generated, and models accept either spelling on input.
- Response models allow unknown fields so new API fields never break
  narrowing.
- ``Paginated[T]`` mirrors the ``{"data": [...], "count": n}`` envelope of
  the list endpoints.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model for objects exchanged with the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_api(self) -> dict:
        """Dump with API field names, dropping unset (``None``) values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Paginated(ApiModel, Generic[T]):
    """Page of results returned by list endpoints."""

    data: List[T]
    count: int


__all__ = ["ApiModel", "Paginated"]
