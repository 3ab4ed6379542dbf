"""核心客户端实现：在服务端与浏览器环境中提供一致的 HTTP 请求接口。

Core HttpClient implementation.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from isohttp._environment import Environment, resolve_environment
from isohttp.config import ClientConfig
from isohttp.interceptors import InterceptorChain
from isohttp.telemetry import get_logger, redact_headers
from isohttp.transport import FetchTransport, HttpxTransport
from isohttp.types import HttpMethod, RequestConfig, Response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from isohttp.client.builder import HttpClientBuilder
    from isohttp.transport import Transport

    RequestInterceptor = Callable[[RequestConfig], RequestConfig | None | Awaitable[RequestConfig | None]]
    ResponseInterceptor = Callable[[Response], Response | None | Awaitable[Response | None]]

logger = get_logger("isohttp.client")


class HttpClient:
    """Environment-agnostic HTTP client.

    Requests go through the same pipeline everywhere: build the config,
    inject the CSRF header, run request interceptors, dispatch to the
    transport for the current runtime, run response interceptors.

    Example:
        >>> client = HttpClient("https://api.example.com")
        >>> response = await client.get("/posts")
        >>> print(response.status, response.data)

        >>> # Credentials and interceptors
        >>> client.set_csrf_token(token)
        >>> client.add_response_interceptor(lambda r: r.raise_for_status())
        >>> await client.post("/posts", {"title": "x"})
    """

    def __init__(
        self,
        base_url: str = "",
        csrf_token: str = "",
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Prefix prepended verbatim to every endpoint
            csrf_token: Credential token sent as the CSRF header; empty = none
            config: Full configuration; base_url/csrf_token, when given, win
            transport: Fixed transport, bypassing environment detection
        """
        overrides: dict[str, Any] = {}
        if base_url:
            overrides["base_url"] = base_url
        if csrf_token:
            overrides["csrf_token"] = csrf_token
        if config is None:
            config = ClientConfig.create(**overrides)
        elif overrides:
            config = config.model_copy(update=overrides)

        self._config = config
        self._base_url = config.base_url
        self._csrf_token = config.csrf_token
        self._transport = transport
        self._transports: dict[Environment, Transport] = {
            Environment.SERVER: HttpxTransport(
                json_content_type=config.json_content_type,
                trust_env=config.trust_env,
            ),
            Environment.BROWSER: FetchTransport(json_content_type=config.json_content_type),
        }
        self._request_interceptors: InterceptorChain[RequestConfig] = InterceptorChain(
            RequestConfig, "request"
        )
        self._response_interceptors: InterceptorChain[Response] = InterceptorChain(
            Response, "response"
        )

    @classmethod
    def from_config(cls, config: ClientConfig, *, transport: Transport | None = None) -> HttpClient:
        """Create a client from a ClientConfig."""
        return cls(config=config, transport=transport)

    @classmethod
    def from_env(cls, **overrides: Any) -> HttpClient:
        """Create a client configured from ISOHTTP_* environment variables."""
        return cls(config=ClientConfig.from_env(**overrides))

    @classmethod
    def builder(cls) -> HttpClientBuilder:
        """Get a builder for fluent configuration.

        Example:
            >>> client = (
            ...     HttpClient.builder()
            ...     .base_url("https://api.example.com")
            ...     .csrf_token(token)
            ...     .request_interceptor(add_trace_header)
            ...     .build()
            ... )
        """
        from isohttp.client.builder import HttpClientBuilder

        return HttpClientBuilder()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def csrf_token(self) -> str:
        return self._csrf_token

    @property
    def config(self) -> ClientConfig:
        return self._config

    def set_csrf_token(self, token: str) -> None:
        """Replace the CSRF token for requests issued from now on."""
        self._csrf_token = token or ""
        self._config = self._config.model_copy(update={"csrf_token": self._csrf_token})

    def add_request_interceptor(self, fn: RequestInterceptor, name: str | None = None) -> None:
        """Append a request interceptor.

        The interceptor receives the RequestConfig (CSRF header already
        set) and returns a replacement, or None to keep it.
        """
        self._request_interceptors.use(fn, name)

    def add_response_interceptor(self, fn: ResponseInterceptor, name: str | None = None) -> None:
        """Append a response interceptor.

        The interceptor receives the Response and returns a replacement,
        or None to keep it.
        """
        self._response_interceptors.use(fn, name)

    @property
    def request_interceptors(self) -> list[str]:
        """Names of registered request interceptors, in order."""
        return self._request_interceptors.names

    @property
    def response_interceptors(self) -> list[str]:
        """Names of registered response interceptors, in order."""
        return self._response_interceptors.names

    def _select_transport(self) -> tuple[Environment | None, Transport]:
        """Pick the transport for one request."""
        if self._transport is not None:
            return None, self._transport

        environment = resolve_environment(self._config.environment)
        return environment, self._transports[environment]

    def _inject_csrf(self, config: RequestConfig) -> None:
        """Set the CSRF header, replacing any caller-supplied variant."""
        header = self._config.csrf_header
        headers = {k: v for k, v in config.headers.items() if k.lower() != header.lower()}
        headers[header] = self._csrf_token
        config.headers = headers

    async def request(
        self,
        method: str | HttpMethod,
        endpoint: str,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Issue a request.

        Args:
            method: GET, POST, PUT or DELETE
            endpoint: Path appended verbatim to the base URL
            options: Request options; ``endpoint``, ``headers`` and ``data`` are
                recognized. Anything else, ``method`` included, is carried in
                ``RequestConfig.extra``; the wire verb is always ``method``
            **kwargs: Options given as keywords; these win over ``options``

        Returns:
            Response after all response interceptors

        Raises:
            ValidationError: Unsupported method or bad interceptor result
            Exception: Transport and interceptor errors, unmodified
        """
        verb = HttpMethod.parse(method)
        config = RequestConfig.from_options(verb, endpoint, {**(options or {}), **kwargs})

        if self._csrf_token:
            self._inject_csrf(config)

        config = await self._request_interceptors.run(config)

        url = f"{self._base_url}{config.endpoint}"
        environment, transport = self._select_transport()
        # The wire verb is always the one the caller asked for
        dispatched = replace(config, method=verb).snapshot()
        request_id = uuid.uuid4().hex[:12]

        logger.debug(
            "Dispatching request",
            request_id=request_id,
            method=verb.value,
            url=url,
            environment=environment.value if environment else "fixed",
            transport=transport.name,
            headers=redact_headers(dispatched.headers, self._config.csrf_header),
        )

        response = await transport.perform_request(verb, url, dispatched)

        logger.debug("Response received", request_id=request_id, status=response.status)

        return await self._response_interceptors.run(response)

    async def get(
        self, endpoint: str, options: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Response:
        """Make a GET request."""
        return await self.request(HttpMethod.GET, endpoint, options, **kwargs)

    async def post(
        self,
        endpoint: str,
        data: Any = None,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Make a POST request with ``data`` as the JSON body."""
        return await self.request(HttpMethod.POST, endpoint, options, **{**kwargs, "data": data})

    async def put(
        self,
        endpoint: str,
        data: Any = None,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Make a PUT request with ``data`` as the JSON body."""
        return await self.request(HttpMethod.PUT, endpoint, options, **{**kwargs, "data": data})

    async def delete(
        self, endpoint: str, options: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Response:
        """Make a DELETE request."""
        return await self.request(HttpMethod.DELETE, endpoint, options, **kwargs)

    async def close(self) -> None:
        """Close all transports created by this client."""
        for transport in self._transports.values():
            await transport.close()

    async def __aenter__(self) -> HttpClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
