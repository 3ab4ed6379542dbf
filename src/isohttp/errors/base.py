"""错误基类：提供分层错误体系和结构化错误上下文。

Base error classes for isohttp.

Provides a layered error hierarchy:
- IsoHttpError: Base class for all library errors
- ValidationError: Invalid request input or interceptor output
- ConfigurationError: Invalid client configuration
- TransportUnavailableError: Selected transport cannot run in this runtime
- HttpStatusError: 4xx/5xx response, raised only on explicit request

Network failures raised by the underlying transport (httpx, fetch) are not
wrapped; they reach the caller unmodified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from isohttp.errors.classification import ErrorClass


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic field (e.g., 'method')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'config', 'transport', 'interceptor')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class IsoHttpError(Exception):
    """Base class for all isohttp errors.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> IsoHttpError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class ValidationError(IsoHttpError):
    """Validation error for requests or interceptor results.

    Raised when:
    - The HTTP method is not one of GET, POST, PUT, DELETE
    - An interceptor returns something other than the value it was given
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        field: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        ctx = context or ErrorContext(source="validation")
        if field:
            ctx.field_path = field
        if expected is not None:
            ctx.details["expected"] = expected
        if actual is not None:
            ctx.details["actual"] = actual
        super().__init__(message, ctx)
        self.field = field
        self.expected = expected
        self.actual = actual


class ConfigurationError(IsoHttpError):
    """Invalid client configuration (bad env var, unknown field, etc.)."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="config")
        if errors:
            ctx.details["errors"] = errors
        super().__init__(message, ctx)
        self.errors = errors or []


class TransportUnavailableError(IsoHttpError):
    """The selected transport cannot run in the current runtime.

    Raised when the browser transport is selected but no fetch
    implementation can be found.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        transport: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if transport:
            ctx.details["transport"] = transport
        super().__init__(message, ctx)
        self.transport = transport


class HttpStatusError(IsoHttpError):
    """A response carried a 4xx or 5xx status.

    The client never raises this on its own; it comes from
    ``Response.raise_for_status()``.

    Attributes:
        status_code: HTTP status code
        error_class: Classification of the status
        body: Response payload (parsed JSON or raw text)
        url: Request URL, when known
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_class: ErrorClass,
        body: Any = None,
        url: str | None = None,
    ) -> None:
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        ctx.details["error_class"] = error_class.value
        if url:
            ctx.details["url"] = url

        super().__init__(message, ctx)

        self.status_code = status_code
        self.error_class = error_class
        self.body = body
        self.url = url

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any = None,
        url: str | None = None,
    ) -> HttpStatusError:
        """Create HttpStatusError from a response status and payload.

        Args:
            status_code: HTTP status code
            body: Response payload
            url: Request URL

        Returns:
            HttpStatusError with appropriate classification
        """
        from isohttp.errors.classification import classify_status, extract_error_message

        error_class = classify_status(status_code)
        message = extract_error_message(body) or f"HTTP {status_code}"
        return cls(
            message=message,
            status_code=status_code,
            error_class=error_class,
            body=body,
            url=url,
        )
