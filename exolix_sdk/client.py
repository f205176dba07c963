"""Exolix v2 API client.

Purpose:
    Typed async access to the Exolix exchange API (docs:
    https://exolix.com/developers). Endpoints covered:

    - ``GET  /currencies``
    - ``GET  /currencies/{code}/networks``
    - ``GET  /currencies/networks``
    - ``GET  /rate``
    - ``GET  /transactions``
    - ``GET  /transactions/{id}``
    - ``POST /transactions``

Usage::

    async with Exolix(api_key=key, timeout_ms=10_000) as api:
        page = await api.list_currencies({"page": 1, "size": 50, "withNetworks": True})

Error handling:
    - Missing or empty required parameters raise ``ValidationError`` before
      anything is sent.
    - Every network-originated failure raises ``ExolixError``; ``kind`` tells
      structured API errors, transport failures and cancellations apart.
    - A success payload that does not fit the endpoint's model raises
      ``ExolixError`` with ``kind=ErrorKind.DECODE``.

Notes:
    - Some endpoints require an API key, sent verbatim as ``Authorization``.
    - Each method performs exactly one request; nothing is retried.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .base.cancellation import CancellationToken
from .base.client_config import ClientConfig, validate_timeout_ms
from .base.dto import (
    CreateTransactionBody,
    CurrencyItem,
    CurrencyNetwork,
    ListCurrenciesParams,
    ListNetworksParams,
    ListTransactionsParams,
    Paginated,
    RateParams,
    RateResponse,
    RequestOptions,
    Transaction,
)
from .base.errors import ErrorKind, ExolixError, ValidationError
from .base.executor import RequestExecutor
from .base.http import HttpxTransport, Transport, quote_segment
from .base.outcome import RequestDescriptor, TypedPayload
from .base.timeouts import Scheduler
from .validation import coerce_params, require_fields, require_non_empty, require_one_amount

T = TypeVar("T")

Params = Union[Mapping[str, Any], None]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class Exolix:
    """Async client for the Exolix v2 REST API.

    Parameters
    ----------
    api_key:
        Exolix API key, sent as the raw ``Authorization`` header value.
    base_url:
        API root; defaults to ``https://exolix.com/api/v2``.
    transport:
        Async callable ``(url, RequestInit) -> TransportResponse``. When
        omitted an :class:`HttpxTransport` is created and owned by the client.
    signal:
        Default cancellation token applied to every call.
    timeout_ms:
        Default per-call timeout in milliseconds.
    scheduler:
        Timer source used for timeouts.
    logger:
        Logger for request events; defaults to ``exolix.executor``.

    Raises
    ------
    ConfigurationError
        When ``transport`` is not callable or ``timeout_ms`` is not a
        non-negative number.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        signal: Optional[CancellationToken] = None,
        timeout_ms: Optional[float] = None,
        scheduler: Optional[Scheduler] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        validate_timeout_ms(timeout_ms)
        self._owned_transport: Optional[HttpxTransport] = None
        if transport is None:
            transport = self._owned_transport = HttpxTransport()
        self._config = ClientConfig(
            transport=transport,
            base_url=base_url,
            api_key=api_key,
            signal=signal,
            timeout_ms=timeout_ms,
            scheduler=scheduler,
        )
        self._executor = RequestExecutor(self._config, logger=logger)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ===== Common =====

    async def list_currencies(
        self,
        params: Union[ListCurrenciesParams, Params] = None,
        options: Optional[RequestOptions] = None,
    ) -> Paginated[CurrencyItem]:
        """List available currencies (``with_networks=True`` adds networks)."""
        query = coerce_params(ListCurrenciesParams, params)
        return await self._get(Paginated[CurrencyItem], "/currencies", query.to_api(), options)

    async def get_currency_networks(
        self,
        code: str,
        options: Optional[RequestOptions] = None,
    ) -> List[CurrencyNetwork]:
        """Get the networks of one currency code."""
        require_non_empty(code, "code")
        path = f"/currencies/{quote_segment(code)}/networks"
        return await self._get(List[CurrencyNetwork], path, None, options)

    async def list_networks(
        self,
        params: Union[ListNetworksParams, Params] = None,
        options: Optional[RequestOptions] = None,
    ) -> Paginated[CurrencyNetwork]:
        """List all networks (paginated)."""
        query = coerce_params(ListNetworksParams, params)
        return await self._get(Paginated[CurrencyNetwork], "/currencies/networks", query.to_api(), options)

    async def get_rate(
        self,
        params: Union[RateParams, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> RateResponse:
        """Get rate and limits for a pair and an amount."""
        query = coerce_params(RateParams, params)
        require_fields(
            query, "coin_from", "coin_to", "rate_type",
            message="coinFrom, coinTo and rateType are required",
        )
        query = require_one_amount(query)
        return await self._get(RateResponse, "/rate", query.to_api(), options)

    # ===== Exchange =====

    async def list_transactions(
        self,
        params: Union[ListTransactionsParams, Params] = None,
        options: Optional[RequestOptions] = None,
    ) -> Paginated[Transaction]:
        """List transaction history (account history needs an API key)."""
        query = coerce_params(ListTransactionsParams, params)
        return await self._get(Paginated[Transaction], "/transactions", query.to_api(), options)

    async def get_transaction(
        self,
        id: str,  # noqa: A002 - mirrors the API field name
        options: Optional[RequestOptions] = None,
    ) -> Transaction:
        """Get a single transaction by id."""
        require_non_empty(id, "id")
        return await self._get(Transaction, f"/transactions/{quote_segment(id)}", None, options)

    async def create_transaction(
        self,
        body: Union[CreateTransactionBody, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> Transaction:
        """Create an exchange transaction."""
        if body is None:
            raise ValidationError("body is required", field="body")
        payload = coerce_params(CreateTransactionBody, body)
        require_fields(payload, "coin_from", "network_from", "coin_to", "network_to", "withdrawal_address")
        payload = require_one_amount(payload)
        if payload.slippage is not None:
            require_fields(payload, "refund_address", message="refundAddress is required when slippage is set")
        return await self._post(Transaction, "/transactions", payload.to_api(), options)

    # ===== Low-level helpers =====

    async def _get(
        self,
        result_type: Type[T],
        path: str,
        query: Optional[Mapping[str, Any]],
        options: Optional[RequestOptions],
    ) -> T:
        return await self._send(result_type, self._describe(path, "GET", query, None, options))

    async def _post(
        self,
        result_type: Type[T],
        path: str,
        body: Optional[Mapping[str, Any]],
        options: Optional[RequestOptions],
    ) -> T:
        serialized = json.dumps(body or {}, ensure_ascii=False)
        return await self._send(result_type, self._describe(path, "POST", None, serialized, options))

    @staticmethod
    def _describe(
        path: str,
        method: str,
        query: Optional[Mapping[str, Any]],
        body: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestDescriptor:
        opts = options or RequestOptions()
        return RequestDescriptor(
            path=path,
            method=method,
            headers=opts.headers or {},
            query=query,
            body=body,
            auth=opts.auth,
            signal=opts.signal,
            timeout_ms=opts.timeout_ms,
        )

    async def _send(self, result_type: Type[T], request: RequestDescriptor) -> T:
        outcome = await self._executor.execute(request)
        if not isinstance(outcome, TypedPayload):
            outcome.unwrap()
        try:
            return _adapter(result_type).validate_python(outcome.data)
        except PydanticValidationError as exc:
            raise ExolixError(
                f"Unexpected response shape ({exc.error_count()} validation errors)",
                outcome.status,
                self._executor.build_url(request.path, request.query),
                outcome.data,
                kind=ErrorKind.DECODE,
            ) from exc

    # ===== Lifecycle =====

    async def aclose(self) -> None:
        """Close the transport created by this client (injected ones are left open)."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> "Exolix":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Exolix(base_url={self.base_url!r})"


__all__ = ["Exolix"]
