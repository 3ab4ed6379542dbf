"""
Client configuration.

ClientConfig is a Pydantic model; ``from_env`` layers ISOHTTP_* environment
variables under explicit overrides.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from isohttp.errors import ConfigurationError

ENV_PREFIX = "ISOHTTP_"

DEFAULT_CSRF_HEADER = "X-CSRF-Token"

# Boolean env values accepted as true/false
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _env_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
    ).with_hint("use 1/0, true/false, yes/no or on/off")


class ClientConfig(BaseModel):
    """Configuration for HttpClient."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    base_url: str = Field(default="", description="Prefix prepended verbatim to every endpoint")
    csrf_token: str = Field(default="", description="Credential token; empty means absent")
    csrf_header: str = Field(
        default=DEFAULT_CSRF_HEADER, description="Header carrying the credential token"
    )
    environment: Literal["auto", "server", "browser"] = Field(
        default="auto", description="Transport selection: auto-detect, or force one"
    )
    json_content_type: bool = Field(
        default=True,
        description="Declare Content-Type: application/json when a body is sent",
    )
    trust_env: bool = Field(
        default=False, description="Let the server transport honour proxy env vars"
    )

    @field_validator("csrf_header")
    @classmethod
    def _check_header_name(cls, value: str) -> str:
        name = value.strip()
        if not name or any(c in name for c in " :\r\n"):
            raise ValueError(f"invalid header name: {value!r}")
        return name

    @classmethod
    def create(cls, **values: Any) -> ClientConfig:
        """Validate values, raising ConfigurationError on failure."""
        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid client configuration: {e.error_count()} error(s)",
                errors=[
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ],
            ) from e

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Load configuration from ISOHTTP_* environment variables.

        Args:
            **overrides: Explicit values; these win over the environment

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If any value is invalid
        """
        values: dict[str, Any] = {}
        for name in ("base_url", "csrf_token", "csrf_header", "environment"):
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip().lower() if name == "environment" else raw
        for name in ("json_content_type", "trust_env"):
            env_name = f"{ENV_PREFIX}{name.upper()}"
            raw = os.getenv(env_name)
            if raw is not None:
                values[name] = _env_flag(env_name, raw)

        values.update(overrides)
        return cls.create(**values)
