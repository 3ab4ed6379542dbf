"""
Telemetry module for isohttp.

Provides structured logging with sensitive data masking.
"""

from isohttp.telemetry.logger import (
    IsoHttpLogger,
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
    redact_headers,
)

__all__ = [
    "IsoHttpLogger",
    "JsonFormatter",
    "LogLevel",
    "SensitiveDataMasker",
    "TextFormatter",
    "get_logger",
    "redact_headers",
]
