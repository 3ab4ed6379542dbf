"""
Types layer - request and response data model.

- HttpMethod: supported verbs
- RequestConfig: mutable request description passed through interceptors
- Response: unified response shape produced by both transports
"""

from isohttp.types.request import HttpMethod, RequestConfig
from isohttp.types.response import Response

__all__ = [
    "HttpMethod",
    "RequestConfig",
    "Response",
]
