"""
Transport layer - network I/O behind a single contract.

Provides:
- HttpxTransport: server-side transport (httpx)
- FetchTransport: browser-side transport (fetch / Pyodide)
- Shared JSON body and header codec
"""

from isohttp.transport.base import (
    JSON_CONTENT_TYPE,
    Transport,
    build_wire_headers,
    decode_body,
    encode_body,
    flatten_headers,
)
from isohttp.transport.fetch import FetchTransport
from isohttp.transport.http import HttpxTransport

__all__ = [
    "FetchTransport",
    "HttpxTransport",
    "JSON_CONTENT_TYPE",
    "Transport",
    "build_wire_headers",
    "decode_body",
    "encode_body",
    "flatten_headers",
]
