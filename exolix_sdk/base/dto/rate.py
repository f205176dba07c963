"""Rate quote DTOs."""

from __future__ import annotations

from typing import Literal, Optional, Union

from .common import ApiModel


RateType = Literal["float", "fixed"]

Amount = Union[str, int, float]


class RateParams(ApiModel):
    """Query of ``GET /rate``.

    ``coin_from``, ``coin_to`` and ``rate_type`` are required, and exactly
    one of ``amount`` (what the user sends) or ``withdrawal_amount`` (what
    the user receives). The client checks this before sending.
    """

    coin_from: Optional[str] = None
    coin_to: Optional[str] = None
    rate_type: Optional[RateType] = None
    amount: Optional[Amount] = None
    withdrawal_amount: Optional[Amount] = None
    network_from: Optional[str] = None
    network_to: Optional[str] = None


class RateResponse(ApiModel):
    from_amount: float
    to_amount: float
    rate: float
    message: Optional[str] = None
    min_amount: float
    withdraw_min: float
    max_amount: float


__all__ = ["RateType", "Amount", "RateParams", "RateResponse"]
