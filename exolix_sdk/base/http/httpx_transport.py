"""Default transport backed by ``httpx.AsyncClient``.

Purpose:
    Adapt ``httpx`` to the :class:`~exolix_sdk.base.http.transport.Transport`
    contract so the client works without a caller-supplied transport.

External dependencies:
    - ``httpx`` for the asynchronous HTTP client.

Timeout strategy:
    - The underlying client is created with ``timeout=None``. Request
      deadlines come exclusively from the effective cancellation signal, so
      there is one timeout mechanism rather than two competing ones.

Cancellation:
    - The request runs as a task raced against ``signal.wait()``. If the
      signal wins, the request task is cancelled and ``CancelledError``
      carrying the signal reason is raised.

Lifecycle & cleanup:
    - A client created here is owned and closed by :meth:`aclose` (or the
      async context manager). An injected client is left to its owner.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from ..cancellation import CancellationToken, CancelledError
from .transport import RequestInit


class HttpxResponse:
    """``TransportResponse`` view over a fully read ``httpx.Response``."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    async def text(self) -> str:
        return self._response.text


class HttpxTransport:
    """Transport issuing requests through an ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=None, follow_redirects=True)

    async def __call__(self, url: str, init: RequestInit) -> HttpxResponse:
        token = init.signal
        if token is not None:
            token.raise_if_cancelled()
        send = self._client.request(
            init.method,
            url,
            headers=dict(init.headers),
            content=init.body,
        )
        if token is None:
            return HttpxResponse(await send)
        return HttpxResponse(await self._race(send, token))

    @staticmethod
    async def _race(send, token: CancellationToken) -> httpx.Response:
        request_task = asyncio.ensure_future(send)
        cancel_task = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()
        if request_task in done:
            return request_task.result()
        await asyncio.gather(request_task, return_exceptions=True)
        raise CancelledError(token.reason)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


__all__ = ["HttpxTransport", "HttpxResponse"]
