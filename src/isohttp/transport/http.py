"""HTTP 传输层：基于 httpx 的服务端异步 HTTP 传输。

Server-side transport using httpx.

Each request reads the whole body before returning; nothing is streamed to
the caller. No timeout is applied and no connection pool outlives the
request unless a client is injected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from isohttp.telemetry import get_logger
from isohttp.transport.base import build_wire_headers, decode_body, encode_body, flatten_headers
from isohttp.types import Response

if TYPE_CHECKING:
    from isohttp.types import HttpMethod, RequestConfig

logger = get_logger("isohttp.transport.http")


class HttpxTransport:
    """Transport for server-style runtimes.

    Example:
        >>> transport = HttpxTransport()
        >>> config = RequestConfig(method=HttpMethod.GET, endpoint="/posts")
        >>> response = await transport.perform_request(
        ...     HttpMethod.GET, "https://api.example.com/posts", config
        ... )
    """

    name = "httpx"

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        json_content_type: bool = True,
        trust_env: bool = False,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            client: Pre-built client to send through; never closed here
            json_content_type: Declare JSON content type on bodies
            trust_env: Honour proxy/certificate environment variables
        """
        self._client = client
        self._json_content_type = json_content_type
        self._trust_env = trust_env

    def _new_client(self) -> httpx.AsyncClient:
        """Create a single-use client for one request."""
        return httpx.AsyncClient(
            timeout=None,
            follow_redirects=False,
            trust_env=self._trust_env,
        )

    async def perform_request(
        self, method: HttpMethod, url: str, config: RequestConfig
    ) -> Response:
        """Send a request and read the full response.

        Args:
            method: HTTP method
            url: Absolute URL
            config: Request snapshot (headers and body)

        Returns:
            Response with JSON data, or raw text if the body is not JSON

        Raises:
            httpx.HTTPError: On connection, DNS or protocol failure (unwrapped)
        """
        target = httpx.URL(url)
        headers = build_wire_headers(config, json_content_type=self._json_content_type)
        content = encode_body(config.data).encode("utf-8") if config.has_body else None

        logger.debug(
            "Opening connection",
            method=method.value,
            scheme=target.scheme,
            secure=target.scheme == "https",
            host=target.host,
            port=target.port,
            path=target.raw_path.decode("ascii", errors="replace"),
        )

        try:
            if self._client is not None:
                response = await self._send(self._client, method, target, headers, content)
            else:
                async with self._new_client() as client:
                    response = await self._send(client, method, target, headers, content)
        except httpx.HTTPError as e:
            logger.warning("Transport failure", url=url, error=type(e).__name__)
            raise

        data, is_json = decode_body(response.text)
        return Response(
            data=data,
            status=response.status_code,
            headers=flatten_headers(response.headers),
            url=url,
            is_json=is_json,
        )

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        method: HttpMethod,
        url: httpx.URL,
        headers: dict[str, str],
        content: bytes | None,
    ) -> httpx.Response:
        request = client.build_request(method.value, url, headers=headers, content=content)
        response = await client.send(request)
        await response.aread()
        return response

    async def close(self) -> None:
        """Nothing to release; per-request clients close themselves."""
