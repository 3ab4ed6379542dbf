"""
Interceptor chains for request/response processing.

A chain is an append-only list of transforms folded left to right: each
interceptor receives the previous result and returns a replacement, or
None (or any other falsy value) to keep the value it was given.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from isohttp.errors import ValidationError
from isohttp.telemetry import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger = get_logger("isohttp.interceptors")


class FunctionInterceptor(Generic[T]):
    """Interceptor created from a plain or async function.

    Example:
        >>> async def add_auth(config):
        ...     config.headers["Authorization"] = f"Bearer {await get_token()}"
        ...     return config
        >>>
        >>> interceptor = FunctionInterceptor(add_auth)
    """

    def __init__(
        self,
        func: Callable[[T], T | None | Awaitable[T | None]],
        name: str | None = None,
    ) -> None:
        """Initialize function interceptor.

        Args:
            func: Transform function, sync or async
            name: Interceptor name (defaults to the function name)
        """
        self._func = func
        self._name = name or getattr(func, "__name__", None) or type(func).__name__

    @property
    def name(self) -> str:
        """Get interceptor name."""
        return self._name

    async def __call__(self, value: T) -> T | None:
        result = self._func(value)
        if inspect.isawaitable(result):
            result = await result
        return result


class InterceptorChain(Generic[T]):
    """Ordered chain of interceptors.

    Example:
        >>> chain = InterceptorChain(Response, "response")
        >>> chain.use(tag_response).use(log_response)
        >>> response = await chain.run(response)
    """

    def __init__(self, value_type: type[T], kind: str = "") -> None:
        """Initialize interceptor chain.

        Args:
            value_type: Type every interceptor must return (or None)
            kind: Label used in logs and errors ('request', 'response')
        """
        self._value_type = value_type
        self._kind = kind or value_type.__name__
        self._interceptors: list[FunctionInterceptor[T]] = []

    def use(
        self,
        func: Callable[[T], T | None | Awaitable[T | None]],
        name: str | None = None,
    ) -> InterceptorChain[T]:
        """Append an interceptor to the chain.

        Args:
            func: Transform function, sync or async
            name: Optional name for logs

        Returns:
            Self for chaining
        """
        if not callable(func):
            raise ValidationError(
                f"{self._kind} interceptor must be callable",
                field="interceptor",
                actual=type(func).__name__,
            )
        interceptor = func if isinstance(func, FunctionInterceptor) else FunctionInterceptor(func, name)
        self._interceptors.append(interceptor)
        return self

    async def run(self, value: T) -> T:
        """Run every interceptor in order.

        Args:
            value: Initial request config or response

        Returns:
            The value produced by the last interceptor that returned one

        Raises:
            ValidationError: If an interceptor returns a truthy value of the
                wrong type
            Exception: Anything an interceptor raises, unmodified
        """
        # Appends made while this run is in progress apply to later runs only
        for index, interceptor in enumerate(list(self._interceptors)):
            logger.debug(
                "Running interceptor",
                chain=self._kind,
                index=index,
                interceptor=interceptor.name,
            )
            result = await interceptor(value)
            if not result:
                continue
            if not isinstance(result, self._value_type):
                raise ValidationError(
                    f"{self._kind} interceptor {interceptor.name!r} returned "
                    f"{type(result).__name__}, expected {self._value_type.__name__} or None",
                    field=f"{self._kind}_interceptors[{index}]",
                    expected=self._value_type.__name__,
                    actual=type(result).__name__,
                )
            value = result
        return value

    @property
    def names(self) -> list[str]:
        """Get list of interceptor names."""
        return [i.name for i in self._interceptors]

    def __len__(self) -> int:
        """Get number of interceptors."""
        return len(self._interceptors)
