"""Request executor: one HTTP call, end to end.

Purpose:
    Build the URL and headers of a :class:`RequestDescriptor`, compose its
    effective cancellation signal, dispatch it through the configured
    transport and classify what happened into exactly one
    :data:`ResponseOutcome`.

Classification order:
    1. The transport raised ``CancelledError``, or raised anything (including
       ``asyncio.CancelledError``) while the effective signal was cancelled
       -> ``Cancelled``. An ``asyncio.CancelledError`` with the signal not
       cancelled is task cancellation and propagates.
    2. Any other transport exception -> ``TransportFailure``.
    3. A response: the body is read as text and parsed as JSON when the
       content type says so and the body is non-empty. 2xx ->
       ``TypedPayload``; otherwise ``StructuredError`` with the message taken
       from ``message``/``error``/``detail``, the status text, or a generic
       fallback. A body that cannot be read or decoded -> ``TransportFailure``.

Resource discipline:
    The effective signal is released in a ``finally`` block, so its timer is
    cancelled exactly once on every path, including unexpected exceptions.

Retries:
    None. Every outcome is returned (or raised by :meth:`request`) as is.
"""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from typing import Any, Mapping, Optional

from ..config.defaults import UNKNOWN_NETWORK_ERROR_MESSAGE
from .cancellation import CancelledError, EffectiveSignal, compose_signals
from .client_config import ClientConfig
from .errors import classify_status, extract_error_message
from .http import RequestInit, TransportResponse, build_headers, join_url
from .logging import LogContext, get_logger, log_event
from .outcome import (
    Cancelled,
    RequestDescriptor,
    ResponseOutcome,
    StructuredError,
    TransportFailure,
    TypedPayload,
)

_JSON_CONTENT_TYPE = "application/json"


def _content_type(response: TransportResponse) -> str:
    headers = response.headers
    return headers.get("content-type") or headers.get("Content-Type") or ""


async def _read_body(response: TransportResponse) -> Any:
    text = await response.text()
    if text and _JSON_CONTENT_TYPE in _content_type(response).lower():
        return json.loads(text)
    return text


def _failure(exc: Exception, url: str, signal: EffectiveSignal) -> ResponseOutcome:
    if isinstance(exc, CancelledError):
        return Cancelled(url, exc.reason if exc.reason is not None else signal.reason)
    if signal.cancelled:
        return Cancelled(url, signal.reason)
    return TransportFailure(str(exc) or UNKNOWN_NETWORK_ERROR_MESSAGE, url)


class RequestExecutor:
    """Executes :class:`RequestDescriptor` objects against one configuration.

    Holds no per-call state; a single executor serves concurrent calls.
    """

    def __init__(self, config: ClientConfig, logger: Optional[logging.Logger] = None) -> None:
        self._config = config
        self._logger = logger or get_logger("exolix.executor")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_url(self, path: str, query: Optional[Mapping[str, Any]] = None) -> str:
        return join_url(self._config.base_url, path, query)

    def build_headers(
        self,
        overrides: Optional[Mapping[str, Optional[str]]] = None,
        auth: Optional[bool] = None,
    ) -> dict:
        return build_headers(self._config.api_key, overrides, auth)

    def compose_signal(self, request: RequestDescriptor) -> EffectiveSignal:
        """Merge the per-call and default signals with the effective timeout."""
        timeout_ms = request.timeout_ms if request.timeout_ms is not None else self._config.timeout_ms
        return compose_signals((request.signal, self._config.signal), timeout_ms, self._config.scheduler)

    async def execute(self, request: RequestDescriptor) -> ResponseOutcome:
        """Perform ``request`` and return its classified outcome."""
        url = self.build_url(request.path, request.query)
        headers = self.build_headers(request.headers, request.auth)
        ctx = LogContext(method=request.method, url=url, request_id=uuid.uuid4().hex[:12])
        log_event(self._logger, "request.start", ctx, level=logging.DEBUG)

        signal = self.compose_signal(request)
        try:
            outcome = await self._dispatch(url, request.method, headers, request.body, signal)
        finally:
            signal.release()
        self._log_outcome(outcome, ctx)
        return outcome

    async def request(self, request: RequestDescriptor) -> Any:
        """Perform ``request``; return the payload or raise ``ExolixError``."""
        outcome = await self.execute(request)
        return outcome.unwrap()

    async def _dispatch(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: Optional[str],
        signal: EffectiveSignal,
    ) -> ResponseOutcome:
        init = RequestInit(method=method, headers=headers, body=body, signal=signal.token)
        try:
            response = await self._config.transport(url, init)
        except asyncio.CancelledError:
            # task cancellation from outside the effective signal propagates
            if not signal.cancelled:
                raise
            return Cancelled(url, signal.reason)
        except Exception as exc:  # noqa: BLE001 - transport boundary; every failure is classified
            return _failure(exc, url, signal)

        try:
            data = await _read_body(response)
        except Exception as exc:  # noqa: BLE001 - unreadable or malformed body
            return _failure(exc, url, signal)

        if 200 <= response.status < 300:
            return TypedPayload(data, response.status)
        return StructuredError(
            message=extract_error_message(data, response.status_text),
            status=response.status,
            url=url,
            data=data,
        )

    def _log_outcome(self, outcome: ResponseOutcome, ctx: LogContext) -> None:
        if isinstance(outcome, TypedPayload):
            log_event(self._logger, "request.success", ctx, level=logging.DEBUG)
        elif isinstance(outcome, StructuredError):
            log_event(
                self._logger,
                "request.error",
                ctx,
                level=logging.WARNING,
                kind="structured",
                status=outcome.status,
                error_code=classify_status(outcome.status).value,
                message=outcome.message,
            )
        elif isinstance(outcome, TransportFailure):
            log_event(
                self._logger,
                "request.error",
                ctx,
                level=logging.WARNING,
                kind="transport",
                error_code="network",
                message=outcome.message,
            )
        else:
            log_event(self._logger, "request.cancelled", ctx, reason=outcome.reason)


__all__ = ["RequestExecutor"]
