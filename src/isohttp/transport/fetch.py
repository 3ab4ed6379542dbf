"""
Browser-side transport using a fetch-style coroutine.

Runs under Pyodide, where ``pyodide.http.pyfetch`` wraps the browser's
``fetch``. Any coroutine with the same shape can be injected instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isohttp.errors import TransportUnavailableError
from isohttp.telemetry import get_logger
from isohttp.transport.base import build_wire_headers, decode_body, encode_body, flatten_headers
from isohttp.types import Response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from isohttp.types import HttpMethod, RequestConfig

    FetchFunc = Callable[..., Awaitable[Any]]

logger = get_logger("isohttp.transport.fetch")


def _load_pyfetch() -> FetchFunc:
    """Locate Pyodide's fetch wrapper."""
    try:
        from pyodide.http import pyfetch
    except ImportError as e:
        raise TransportUnavailableError(
            "Browser transport requires Pyodide's pyodide.http.pyfetch",
            transport=FetchTransport.name,
        ).with_hint("run under Pyodide or pass fetch= to FetchTransport") from e
    return pyfetch


async def _read_text(response: Any) -> str:
    """Read a fetch response body as text."""
    # Older Pyodide FetchResponse only offers string()
    reader = getattr(response, "text", None) or response.string
    text = await reader()
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text


class FetchTransport:
    """Transport for browser-hosted runtimes.

    Example:
        >>> transport = FetchTransport()  # pyodide.http.pyfetch
        >>> transport = FetchTransport(fetch=my_fetch)
    """

    name = "fetch"

    def __init__(
        self,
        *,
        fetch: FetchFunc | None = None,
        json_content_type: bool = True,
    ) -> None:
        """Initialize fetch transport.

        Args:
            fetch: ``fetch(url, method=, headers=, body=)`` coroutine;
                defaults to ``pyodide.http.pyfetch`` on first use
            json_content_type: Declare JSON content type on bodies
        """
        self._fetch = fetch
        self._json_content_type = json_content_type

    def _get_fetch(self) -> FetchFunc:
        if self._fetch is None:
            self._fetch = _load_pyfetch()
        return self._fetch

    async def perform_request(
        self, method: HttpMethod, url: str, config: RequestConfig
    ) -> Response:
        """Send a request through fetch and read the full response.

        Args:
            method: HTTP method
            url: Absolute URL
            config: Request snapshot (headers and body)

        Returns:
            Response with JSON data, or raw text if the body is not JSON

        Raises:
            TransportUnavailableError: If no fetch implementation is available
        """
        fetch = self._get_fetch()

        kwargs: dict[str, Any] = {
            "method": method.value,
            "headers": build_wire_headers(config, json_content_type=self._json_content_type),
        }
        if config.has_body:
            kwargs["body"] = encode_body(config.data)

        logger.debug("Calling fetch", method=method.value, url=url)

        try:
            response = await fetch(url, **kwargs)
        except Exception as e:
            logger.warning("Transport failure", url=url, error=type(e).__name__)
            raise

        data, is_json = decode_body(await _read_text(response))
        return Response(
            data=data,
            status=int(response.status),
            headers=flatten_headers(response.headers),
            url=url,
            is_json=is_json,
        )

    async def close(self) -> None:
        """Nothing to release; fetch holds no client state."""
