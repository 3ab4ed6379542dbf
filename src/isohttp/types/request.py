"""
Request types: HTTP method enumeration and the mutable request configuration
that flows through the request interceptor chain.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from isohttp.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Option keys that map onto RequestConfig fields rather than ``extra``
_OPTION_FIELDS = frozenset({"endpoint", "headers", "data"})
_RECOGNIZED_OPTIONS = _OPTION_FIELDS | {"method"}


class HttpMethod(str, Enum):
    """Supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: str | HttpMethod) -> HttpMethod:
        """Parse a method name in any casing.

        Raises:
            ValidationError: If the method is not supported
        """
        if isinstance(value, HttpMethod):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValidationError(
            f"Unsupported HTTP method: {value!r}",
            field="method",
            expected=[m.value for m in cls],
            actual=value,
        )


@dataclass
class RequestConfig:
    """Configuration of a single request.

    Mutable while it passes through the request interceptor chain. The
    transport receives a ``snapshot()`` and never sees later changes.

    Attributes:
        method: HTTP method
        endpoint: Path appended verbatim to the client's base URL
        headers: Wire headers
        data: JSON-serializable body; None means no body
        extra: Any additional caller-supplied options
    """

    method: HttpMethod
    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(
        cls,
        method: str | HttpMethod,
        endpoint: str,
        options: Mapping[str, Any] | None = None,
    ) -> RequestConfig:
        """Build a config from positional arguments and an options mapping.

        Options are layered over the positional values, so an ``endpoint``
        key in ``options`` wins. The method always comes from the positional
        argument; a ``method`` option is kept in ``extra`` with the other
        unrecognized keys.
        """
        opts = dict(options or {})
        headers = opts.get("headers") or {}
        return cls(
            method=HttpMethod.parse(method),
            endpoint=opts.get("endpoint", endpoint),
            headers=dict(headers),
            data=opts.get("data"),
            extra={k: v for k, v in opts.items() if k not in _OPTION_FIELDS},
        )

    @property
    def has_body(self) -> bool:
        """Whether a request body will be sent."""
        return self.data is not None

    def snapshot(self) -> RequestConfig:
        """Return an independent copy for dispatch."""
        return replace(
            self,
            method=HttpMethod.parse(self.method),
            headers=dict(self.headers),
            data=copy.deepcopy(self.data),
            extra=dict(self.extra),
        )

    def __getitem__(self, key: str) -> Any:
        if key in _RECOGNIZED_OPTIONS:
            return getattr(self, key)
        return self.extra[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a field or extra option by name."""
        try:
            return self[key]
        except KeyError:
            return default
