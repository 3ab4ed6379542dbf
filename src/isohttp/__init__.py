"""同构 HTTP 客户端：在服务端与浏览器中使用同一套请求接口。

isohttp: environment-agnostic async HTTP client.

One facade issues requests the same way in a server process (httpx) and in a
browser-hosted interpreter (fetch via Pyodide), with ordered request and
response interceptors for cross-cutting concerns.
"""
from __future__ import annotations

from isohttp._environment import Environment, is_server_environment, resolve_environment
from isohttp.client import HttpClient, HttpClientBuilder
from isohttp.config import ClientConfig
from isohttp.errors import (
    ConfigurationError,
    HttpStatusError,
    IsoHttpError,
    TransportUnavailableError,
    ValidationError,
)
from isohttp.interceptors import InterceptorChain
from isohttp.transport import FetchTransport, HttpxTransport, Transport
from isohttp.types import HttpMethod, RequestConfig, Response

__version__ = "0.3.0"

__all__ = [
    # Client
    "ClientConfig",
    "HttpClient",
    "HttpClientBuilder",
    # Environment
    "Environment",
    "is_server_environment",
    "resolve_environment",
    # Errors
    "ConfigurationError",
    "HttpStatusError",
    "IsoHttpError",
    "TransportUnavailableError",
    "ValidationError",
    # Interceptors
    "InterceptorChain",
    # Transports
    "FetchTransport",
    "HttpxTransport",
    "Transport",
    # Types
    "HttpMethod",
    "RequestConfig",
    "Response",
    # Version
    "__version__",
]
