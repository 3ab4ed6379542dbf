"""
Status classification for HTTP error responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorClass(str, Enum):
    """Coarse classification of an HTTP error status."""

    INVALID_REQUEST = "invalid_request"
    """Malformed request body or invalid parameters."""

    AUTHENTICATION = "authentication"
    """Missing/invalid credentials."""

    PERMISSION_DENIED = "permission_denied"
    """Authenticated but not permitted; also a rejected CSRF token."""

    NOT_FOUND = "not_found"
    """Requested resource not found."""

    CONFLICT = "conflict"
    """Request conflicts with current resource state."""

    RATE_LIMITED = "rate_limited"
    """Throttled by the server."""

    SERVER_ERROR = "server_error"
    """Server-side failure (5xx)."""

    OTHER = "other"
    """Anything not covered above."""


_DEFAULT_STATUS_MAPPING: dict[int, ErrorClass] = {
    400: ErrorClass.INVALID_REQUEST,
    401: ErrorClass.AUTHENTICATION,
    403: ErrorClass.PERMISSION_DENIED,
    404: ErrorClass.NOT_FOUND,
    409: ErrorClass.CONFLICT,
    419: ErrorClass.PERMISSION_DENIED,  # Laravel-style CSRF token mismatch
    422: ErrorClass.INVALID_REQUEST,
    429: ErrorClass.RATE_LIMITED,
}


def classify_status(status_code: int) -> ErrorClass:
    """Classify an HTTP status code.

    Args:
        status_code: HTTP status code

    Returns:
        ErrorClass for the status
    """
    if status_code in _DEFAULT_STATUS_MAPPING:
        return _DEFAULT_STATUS_MAPPING[status_code]

    if 400 <= status_code < 500:
        return ErrorClass.INVALID_REQUEST
    if 500 <= status_code < 600:
        return ErrorClass.SERVER_ERROR

    return ErrorClass.OTHER


def extract_error_message(body: Any) -> str | None:
    """Extract an error message from a response payload.

    Supports:
    - {"error": {"message": "..."}}
    - {"error": "..."}
    - {"message": "..."}
    - {"detail": "..."} / {"detail": [...]}
    - A non-empty raw text body

    Args:
        body: Response payload (parsed JSON or raw text)

    Returns:
        Error message if found, None otherwise
    """
    if not body:
        return None

    if isinstance(body, str):
        text = body.strip()
        return text[:200] if text else None

    if not isinstance(body, dict):
        return None

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            msg = error.get("message")
            if isinstance(msg, str):
                return msg
        elif isinstance(error, str):
            return error

    if "message" in body:
        msg = body["message"]
        if isinstance(msg, str):
            return msg

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list) and detail:
            return str(detail[0])

    return None
