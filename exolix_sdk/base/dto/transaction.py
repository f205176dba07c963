"""
Transaction DTOs.

Covers the exchange transaction returned by ``GET /transactions/{id}`` and
``POST /transactions``, the paginated history query, and the creation body.
``withdrawal_extra_id`` and ``source`` are only present on some responses.
Response enums (``status``, ``rate_type``, ``source``) also accept values
newer than the literals listed here.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import Field

from .common import ApiModel
from .rate import RateType


TransactionStatus = Literal[
    "wait",
    "confirmation",
    "confirmed",
    "exchanging",
    "sending",
    "success",
    "overdue",
    "refunded",
]

TransactionSource = Literal["api", "referral"]


class TransactionCoin(ApiModel):
    coin_code: str
    coin_name: str
    network: str
    network_name: str
    network_short_name: Optional[str] = None
    icon: str = ""
    memo_name: Optional[str] = None
    contract: Optional[str] = None


class HashLink(ApiModel):
    hash: Optional[str] = None
    link: Optional[str] = None


class Transaction(ApiModel):
    """An exchange transaction."""

    id: str
    amount: float
    amount_to: float
    coin_from: TransactionCoin
    coin_to: TransactionCoin
    comment: Optional[str] = None
    created_at: str
    deposit_address: str
    deposit_extra_id: Optional[str] = None
    withdrawal_address: str
    withdrawal_extra_id: Optional[str] = None
    hash_in: HashLink
    hash_out: HashLink
    rate: float
    rate_type: Union[RateType, str]
    refund_address: Optional[str] = None
    refund_extra_id: Optional[str] = None
    status: Union[TransactionStatus, str]
    source: Optional[Union[TransactionSource, str]] = None


class ListTransactionsParams(ApiModel):
    """Query of ``GET /transactions``.

    ``search`` matches a transaction id, ``sort`` names a field,
    ``date_from``/``date_to`` are ISO datetimes and ``statuses`` is a
    comma-separated list of :data:`TransactionStatus` values.
    """

    page: Optional[int] = Field(default=None, ge=1)
    size: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = None
    sort: Optional[str] = None
    order: Optional[Literal["asc", "desc"]] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    statuses: Optional[str] = None


class CreateTransactionBody(ApiModel):
    """Body of ``POST /transactions``.

    Required: ``coin_from``, ``network_from``, ``coin_to``, ``network_to``,
    ``withdrawal_address`` and one of ``amount``/``withdrawal_amount``.
    ``refund_address`` is required when ``slippage`` (percent) is given.
    """

    coin_from: Optional[str] = None
    network_from: Optional[str] = None
    coin_to: Optional[str] = None
    network_to: Optional[str] = None
    amount: Optional[Union[int, float]] = None
    withdrawal_amount: Optional[Union[int, float]] = None
    withdrawal_address: Optional[str] = None
    withdrawal_extra_id: Optional[str] = None
    rate_type: Optional[RateType] = None
    refund_address: Optional[str] = None
    refund_extra_id: Optional[str] = None
    slippage: Optional[float] = None


__all__ = [
    "TransactionStatus",
    "TransactionSource",
    "TransactionCoin",
    "HashLink",
    "Transaction",
    "ListTransactionsParams",
    "CreateTransactionBody",
]
