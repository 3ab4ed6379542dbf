"""
Builder for fluent HttpClient construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isohttp.config import ClientConfig

if TYPE_CHECKING:
    from isohttp.client.core import HttpClient, RequestInterceptor, ResponseInterceptor
    from isohttp.transport import Transport


class HttpClientBuilder:
    """Builder for creating HttpClient instances with custom configuration.

    Example:
        >>> client = (
        ...     HttpClientBuilder()
        ...     .base_url("https://api.example.com")
        ...     .csrf_token(token)
        ...     .environment("server")
        ...     .response_interceptor(unwrap_envelope)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        """Initialize the builder."""
        self._values: dict[str, Any] = {}
        self._from_env = False
        self._transport: Transport | None = None
        self._request_interceptors: list[RequestInterceptor] = []
        self._response_interceptors: list[ResponseInterceptor] = []

    def base_url(self, url: str) -> HttpClientBuilder:
        """Set the base URL.

        Args:
            url: Prefix prepended verbatim to every endpoint

        Returns:
            Self for chaining
        """
        self._values["base_url"] = url
        return self

    def csrf_token(self, token: str) -> HttpClientBuilder:
        """Set the CSRF token.

        Args:
            token: Credential token

        Returns:
            Self for chaining
        """
        self._values["csrf_token"] = token
        return self

    def csrf_header(self, name: str) -> HttpClientBuilder:
        """Set the header that carries the CSRF token.

        Args:
            name: Header name (default X-CSRF-Token)

        Returns:
            Self for chaining
        """
        self._values["csrf_header"] = name
        return self

    def environment(self, environment: str) -> HttpClientBuilder:
        """Force transport selection.

        Args:
            environment: 'auto', 'server' or 'browser'

        Returns:
            Self for chaining
        """
        self._values["environment"] = environment
        return self

    def json_content_type(self, enable: bool = True) -> HttpClientBuilder:
        """Declare Content-Type: application/json on request bodies."""
        self._values["json_content_type"] = enable
        return self

    def trust_env(self, enable: bool = True) -> HttpClientBuilder:
        """Let the server transport honour proxy environment variables."""
        self._values["trust_env"] = enable
        return self

    def from_env(self, enable: bool = True) -> HttpClientBuilder:
        """Start from ISOHTTP_* environment variables; builder values win."""
        self._from_env = enable
        return self

    def transport(self, transport: Transport) -> HttpClientBuilder:
        """Use a fixed transport instead of environment detection."""
        self._transport = transport
        return self

    def request_interceptor(self, fn: RequestInterceptor) -> HttpClientBuilder:
        """Append a request interceptor."""
        self._request_interceptors.append(fn)
        return self

    def response_interceptor(self, fn: ResponseInterceptor) -> HttpClientBuilder:
        """Append a response interceptor."""
        self._response_interceptors.append(fn)
        return self

    def build(self) -> HttpClient:
        """Build the HttpClient instance.

        Raises:
            ConfigurationError: If any configured value is invalid
        """
        from isohttp.client.core import HttpClient

        if self._from_env:
            config = ClientConfig.from_env(**self._values)
        else:
            config = ClientConfig.create(**self._values)

        client = HttpClient(config=config, transport=self._transport)
        for fn in self._request_interceptors:
            client.add_request_interceptor(fn)
        for fn in self._response_interceptors:
            client.add_response_interceptor(fn)
        return client
