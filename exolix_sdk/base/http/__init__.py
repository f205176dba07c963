"""HTTP utilities package.

Exposes the transport contract, the default httpx transport, and the URL and
header builders used by the request executor.
"""

from .transport import HeaderLookup, RequestInit, Transport, TransportResponse
from .httpx_transport import HttpxResponse, HttpxTransport
from .query import build_query, join_url, quote_segment
from .headers import build_headers

__all__ = [
    "HeaderLookup",
    "RequestInit",
    "Transport",
    "TransportResponse",
    "HttpxResponse",
    "HttpxTransport",
    "build_query",
    "join_url",
    "quote_segment",
    "build_headers",
]
