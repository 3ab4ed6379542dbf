"""
Interceptors - ordered request/response transform chains.
"""

from isohttp.interceptors.chain import FunctionInterceptor, InterceptorChain

__all__ = [
    "FunctionInterceptor",
    "InterceptorChain",
]
