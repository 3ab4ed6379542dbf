"""
Structured logging for isohttp.

Log calls carry key/value fields. Both formatters run every message and
field through a SensitiveDataMasker, so credential headers (CSRF tokens,
cookies, authorization) never reach log output.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping

_REDACTED = "***REDACTED***"

# Substrings that mark a mapping key as sensitive
_SENSITIVE_KEYS = ("key", "token", "secret", "password", "auth", "csrf", "cookie")

# Header-style names whose value is redacted inside free text
_SENSITIVE_NAMES = (
    r"x-csrf-token",
    r"csrf[_-]?token",
    r"authorization",
    r"cookie",
    r"ISOHTTP_CSRF_TOKEN",
)


def _name_pattern(name: str) -> str:
    return rf"({name}[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}}]+)"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        return getattr(logging, self.value)


class SensitiveDataMasker:
    """Redacts credentials in log text and in structured fields."""

    # Bearer runs first so "Authorization: Bearer <t>" loses the token itself
    DEFAULT_PATTERNS: ClassVar[list[tuple[str, str]]] = [
        (r"(Bearer\s+)(\S+)", rf"\1{_REDACTED}"),
        *((_name_pattern(name), rf"\1{_REDACTED}") for name in _SENSITIVE_NAMES),
    ]

    def __init__(self, patterns: list[tuple[str, str]] | None = None) -> None:
        self._patterns = [
            (re.compile(pattern, re.IGNORECASE), replacement)
            for pattern, replacement in (patterns or self.DEFAULT_PATTERNS)
        ]

    def mask(self, text: str) -> str:
        """Apply every pattern to ``text``."""
        for pattern, replacement in self._patterns:
            text = pattern.sub(replacement, text)
        return text

    def mask_dict(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Mask a field mapping.

        Values under a sensitive-looking key are replaced outright; strings
        are pattern-masked; nested mappings and lists are walked.
        """
        return {key: self._mask_value(key, value) for key, value in data.items()}

    def _mask_value(self, key: Any, value: Any) -> Any:
        if any(marker in str(key).lower() for marker in _SENSITIVE_KEYS):
            return _REDACTED
        if isinstance(value, str):
            return self.mask(value)
        if isinstance(value, dict):
            return self.mask_dict(value)
        if isinstance(value, list):
            return [self.mask_dict(v) if isinstance(v, dict) else v for v in value]
        return value


def redact_headers(headers: Mapping[str, str], *names: str) -> dict[str, str]:
    """Copy ``headers`` with the values of ``names`` (any casing) redacted.

    Covers credential headers whose names the masker cannot recognize,
    such as a custom CSRF header.
    """
    hidden = {name.lower() for name in names}
    return {k: _REDACTED if k.lower() in hidden else v for k, v in headers.items()}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "extra_fields", {})


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(
        self,
        masker: SensitiveDataMasker | None = None,
        include_timestamp: bool = True,
    ) -> None:
        super().__init__()
        self._masker = masker or SensitiveDataMasker()
        self._include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": self._masker.mask(record.getMessage()),
        }
        if self._include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            entry["timestamp"] = created.isoformat(timespec="milliseconds")
        entry.update(self._masker.mask_dict(_extra_fields(record)))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``time | level | logger | message | k=v ...`` lines."""

    def __init__(
        self,
        masker: SensitiveDataMasker | None = None,
        include_fields: bool = True,
    ) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self._masker = masker or SensitiveDataMasker()
        self._include_fields = include_fields

    def format(self, record: logging.LogRecord) -> str:
        line = self._masker.mask(super().format(record))
        fields = self._masker.mask_dict(_extra_fields(record)) if self._include_fields else {}
        if fields:
            line += " | " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


class IsoHttpLogger:
    """Thin wrapper over ``logging.Logger`` that takes keyword fields.

    Example:
        >>> IsoHttpLogger.configure(level=LogLevel.DEBUG, format="text")
        >>> get_logger("isohttp.client").debug("Dispatching request", method="GET")
    """

    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _level: ClassVar[LogLevel] = LogLevel.INFO
    _formatter: ClassVar[logging.Formatter | None] = None
    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(
        cls,
        level: LogLevel = LogLevel.INFO,
        format: str = "json",
        stream: Any = None,
        masker: SensitiveDataMasker | None = None,
    ) -> None:
        """Set level, output format ('json' or 'text') and stream for all isohttp loggers."""
        formatter_cls = JsonFormatter if format == "json" else TextFormatter
        cls._level = level
        cls._formatter = formatter_cls(masker=masker)
        cls._handler = logging.StreamHandler(stream or sys.stderr)
        cls._handler.setFormatter(cls._formatter)
        cls._handler.setLevel(level.to_logging_level())

        for logger in cls._loggers.values():
            cls._attach(logger)

    @classmethod
    def _attach(cls, logger: logging.Logger) -> None:
        logger.setLevel(cls._level.to_logging_level())
        if cls._handler is not None:
            logger.handlers.clear()
            logger.addHandler(cls._handler)
        elif not logger.handlers:
            fallback = logging.StreamHandler(sys.stderr)
            fallback.setFormatter(TextFormatter())
            logger.addHandler(fallback)

    @classmethod
    def get_logger(cls, name: str) -> IsoHttpLogger:
        if name not in cls._loggers:
            logger = logging.getLogger(name)
            cls._attach(logger)
            logger.propagate = False
            cls._loggers[name] = logger
        return cls(cls._loggers[name])

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, msg: str, **fields: Any) -> None:
        self._logger.log(level, msg, extra={"extra_fields": fields} if fields else None)

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, **fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, **fields)


def get_logger(name: str) -> IsoHttpLogger:
    """Get the isohttp logger called ``name``."""
    return IsoHttpLogger.get_logger(name)
