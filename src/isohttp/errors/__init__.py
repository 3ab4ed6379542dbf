"""
Error hierarchy for isohttp.
"""

from isohttp.errors.base import (
    ConfigurationError,
    ErrorContext,
    HttpStatusError,
    IsoHttpError,
    TransportUnavailableError,
    ValidationError,
)
from isohttp.errors.classification import (
    ErrorClass,
    classify_status,
    extract_error_message,
)

__all__ = [
    "ConfigurationError",
    "ErrorClass",
    "ErrorContext",
    "HttpStatusError",
    "IsoHttpError",
    "TransportUnavailableError",
    "ValidationError",
    "classify_status",
    "extract_error_message",
]
