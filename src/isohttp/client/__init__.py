"""
Client layer - User-facing API.

This module provides:
- HttpClient: environment-agnostic request facade
- HttpClientBuilder: fluent construction
"""

from isohttp.client.builder import HttpClientBuilder
from isohttp.client.core import HttpClient

__all__ = [
    "HttpClient",
    "HttpClientBuilder",
]
