"""DTO package: Exolix request parameters and response payloads."""

from .common import ApiModel, Paginated
from .currency import CurrencyItem, CurrencyNetwork, ListCurrenciesParams, ListNetworksParams
from .rate import Amount, RateParams, RateResponse, RateType
from .transaction import (
    CreateTransactionBody,
    HashLink,
    ListTransactionsParams,
    Transaction,
    TransactionCoin,
    TransactionSource,
    TransactionStatus,
)
from .request_options import RequestOptions

__all__ = [
    "ApiModel",
    "Paginated",
    "CurrencyItem",
    "CurrencyNetwork",
    "ListCurrenciesParams",
    "ListNetworksParams",
    "Amount",
    "RateParams",
    "RateResponse",
    "RateType",
    "CreateTransactionBody",
    "HashLink",
    "ListTransactionsParams",
    "Transaction",
    "TransactionCoin",
    "TransactionSource",
    "TransactionStatus",
    "RequestOptions",
]
