"""Application configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads configuration parameters
from environment variables and a `.env` file. It centralizes the tunable
parameters of an extraction run: which keys are recognised as payload holders,
the payload prefix, history capacity, output indentation and the lifetime of
the transient "copied" feedback flag.

The `get_settings` function provides a cached, singleton instance of the
configuration, ensuring consistent settings throughout the application. Core
pipeline functions never call it; they receive explicit arguments from the
session or CLI.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

DEFAULT_PAYLOAD_KEYS: Tuple[str, ...] = ("src", "image")
DEFAULT_PAYLOAD_PREFIX = "/9j/"
DEFAULT_HISTORY_LIMIT = 3
DEFAULT_JSON_INDENT = 2
DEFAULT_COPY_FEEDBACK_SECONDS = 2.0


class Settings(BaseSettings):
    """Defines all application configuration parameters.

    Values come from environment variables or a `.env` file. `PAYLOAD_KEYS`
    accepts either a list (from code/tests) or a comma-separated string (from
    the environment).
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # ---------------- Payload matching -----------------
    # Use Any type to prevent Pydantic Settings JSON decoding; validator converts to list[str]
    PAYLOAD_KEYS: Any = Field(
        default_factory=lambda: list(DEFAULT_PAYLOAD_KEYS),
        description=(
            "Comma-separated list of mapping keys whose string values are treated as "
            "payloads when they start with PAYLOAD_PREFIX. Exact, case-sensitive match."
        ),
    )
    PAYLOAD_PREFIX: str = Field(
        default=DEFAULT_PAYLOAD_PREFIX,
        description="Literal prefix marking a base64 payload (JPEG magic bytes in base64)",
    )

    # ---------------- Output / history -----------------
    HISTORY_LIMIT: int = Field(
        default=DEFAULT_HISTORY_LIMIT,
        ge=1,
        description="Maximum number of cleaned documents kept in the run history (newest first)",
    )
    JSON_INDENT: int = Field(
        default=DEFAULT_JSON_INDENT,
        ge=0,
        description="Indentation width for the cleaned JSON document",
    )
    COPY_FEEDBACK_SECONDS: float = Field(
        default=DEFAULT_COPY_FEEDBACK_SECONDS,
        ge=0,
        description="Seconds a copied flag stays set after a successful clipboard write",
    )

    @field_validator("PAYLOAD_KEYS", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Parse comma-separated string into list of stripped strings.

        Supports both direct list input and comma-separated string input.
        Blank input falls back to the built-in key set so matching is never
        silently disabled.

        Args:
            v: Input value (string or list)

        Returns:
            List of stripped key names with empty entries removed
        """
        if isinstance(v, (list, tuple)):
            keys = [str(s).strip() for s in v if str(s).strip()]
        elif isinstance(v, str):
            keys = [s.strip() for s in v.split(",") if s.strip()]
        else:
            keys = []
        return keys or list(DEFAULT_PAYLOAD_KEYS)

    @field_validator("PAYLOAD_PREFIX", mode="before")
    @classmethod
    def require_prefix(cls, v: Any) -> str:
        """Reject a blank prefix, which would match every string value."""
        if v is None or (isinstance(v, str) and not v):
            return DEFAULT_PAYLOAD_PREFIX
        return v

    @property
    def payload_keys(self) -> frozenset[str]:
        return frozenset(self.PAYLOAD_KEYS)


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the application settings."""
    return Settings()


__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_PAYLOAD_KEYS",
    "DEFAULT_PAYLOAD_PREFIX",
    "DEFAULT_HISTORY_LIMIT",
    "DEFAULT_JSON_INDENT",
    "DEFAULT_COPY_FEEDBACK_SECONDS",
]
