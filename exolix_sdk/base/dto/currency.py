"""
Currency and network DTOs.

Payload shapes
--------------
- ``CurrencyItem.networks`` is present only when ``list_currencies`` is
  called with ``with_networks=True``.
- The API documents the network address pattern under two spellings,
  ``addressRegex`` and ``addresRegex``; both are kept. Use
  :attr:`CurrencyNetwork.address_pattern` to read whichever is set.
- ``precision`` is documented both as a number and as a boolean.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from .common import ApiModel


class CurrencyNetwork(ApiModel):
    """A blockchain network a currency can be sent on."""

    network: str
    name: str
    short_name: Optional[str] = None
    notes: Optional[str] = None
    address_regex: Optional[str] = None
    addres_regex: Optional[str] = None
    is_default: bool = False
    block_explorer: Optional[str] = None
    memo_needed: bool = False
    memo_name: Optional[str] = None
    memo_regex: Optional[str] = None
    precision: Optional[Union[bool, int]] = None
    decimal: Optional[int] = None
    contract: Optional[str] = None
    icon: Optional[str] = None

    @property
    def address_pattern(self) -> Optional[str]:
        return self.address_regex or self.addres_regex


class CurrencyItem(ApiModel):
    """A listed currency."""

    code: str
    name: str
    icon: str = ""
    notes: str = ""
    networks: Optional[List[CurrencyNetwork]] = None


class ListCurrenciesParams(ApiModel):
    page: Optional[int] = Field(default=None, ge=1)
    size: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = None
    with_networks: Optional[bool] = None


class ListNetworksParams(ApiModel):
    page: Optional[int] = Field(default=None, ge=1)
    size: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = None


__all__ = [
    "CurrencyNetwork",
    "CurrencyItem",
    "ListCurrenciesParams",
    "ListNetworksParams",
]
