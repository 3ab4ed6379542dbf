"""
Transport contract and the body/header codec shared by both transports.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from isohttp.types import HttpMethod, RequestConfig, Response

JSON_CONTENT_TYPE = "application/json"


@runtime_checkable
class Transport(Protocol):
    """Performs the network I/O for one runtime environment."""

    name: str

    async def perform_request(
        self, method: HttpMethod, url: str, config: RequestConfig
    ) -> Response:
        """Send the request and return the fully read response."""
        ...

    async def close(self) -> None:
        """Release any resources held by the transport."""
        ...


def encode_body(data: Any) -> str:
    """Serialize a request body as compact JSON text."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def build_wire_headers(
    config: RequestConfig, *, json_content_type: bool = True
) -> dict[str, str]:
    """Headers to put on the wire for ``config``.

    Returns a new dict; ``config.headers`` is left untouched. When a body is
    sent and no content type was given, JSON is declared.
    """
    headers = {str(k): str(v) for k, v in config.headers.items()}
    if (
        json_content_type
        and config.has_body
        and not any(k.lower() == "content-type" for k in headers)
    ):
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


def decode_body(text: str) -> tuple[Any, bool]:
    """Decode a response body.

    Returns:
        (parsed JSON, True), or (raw text, False) when the body is not JSON
    """
    try:
        return json.loads(text), True
    except ValueError:
        return text, False


def flatten_headers(headers: Any) -> dict[str, str]:
    """Flatten a header collection into a plain dict with lower-cased names.

    Accepts a mapping, anything with ``items()`` or ``entries()`` (such as a
    fetch ``Headers`` object), or an iterable of (name, value) pairs.
    Repeated names are joined with ', '.
    """
    if headers is None:
        return {}
    if hasattr(headers, "items"):
        pairs = headers.items()
    elif hasattr(headers, "entries"):
        pairs = headers.entries()
    else:
        pairs = headers

    result: dict[str, str] = {}
    for key, value in pairs:
        name = str(key).lower()
        if name in result:
            result[name] = f"{result[name]}, {value}"
        else:
            result[name] = str(value)
    return result
