"""exolix_sdk package

Async Python client for the Exolix v2 exchange API.

Purpose:
    Provide a small, stable API for external consumption (packaging is
    configured via the repository root ``pyproject.toml``). Callers create an
    :class:`Exolix` instance and await its endpoint methods.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Exolix`, :class:`RequestOptions`
    - Cancellation: :class:`CancellationToken`, :func:`compose_signals`
    - Errors: :class:`ExolixError`, :class:`ValidationError`,
      :class:`ConfigurationError`, :class:`ErrorKind`, :class:`ErrorCode`
    - Transport: :class:`HttpxTransport`, :class:`RequestInit`
    - DTOs: currency, network, rate and transaction models
"""

from .base.cancellation import CancellationToken, CancelledError, compose_signals
from .base.dto import (
    CreateTransactionBody,
    CurrencyItem,
    CurrencyNetwork,
    HashLink,
    ListCurrenciesParams,
    ListNetworksParams,
    ListTransactionsParams,
    Paginated,
    RateParams,
    RateResponse,
    RequestOptions,
    Transaction,
    TransactionCoin,
)
from .base.errors import ConfigurationError, ErrorCode, ErrorKind, ExolixError, ValidationError
from .base.http import HttpxTransport, RequestInit
from .client import Exolix

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Exolix",
    "RequestOptions",
    "CancellationToken",
    "CancelledError",
    "compose_signals",
    "ConfigurationError",
    "ErrorCode",
    "ErrorKind",
    "ExolixError",
    "ValidationError",
    "HttpxTransport",
    "RequestInit",
    "CreateTransactionBody",
    "CurrencyItem",
    "CurrencyNetwork",
    "HashLink",
    "ListCurrenciesParams",
    "ListNetworksParams",
    "ListTransactionsParams",
    "Paginated",
    "RateParams",
    "RateResponse",
    "Transaction",
    "TransactionCoin",
]
