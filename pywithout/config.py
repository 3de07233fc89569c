"""Settings loaded from environment variables."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .matchers import parse_matcher
from .protocols import MatcherLike

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class BlockerSettings(BaseSettings):
    """Blocker settings loaded from environment variables.

    All settings use the PYWITHOUT_ prefix.

    Environment Variables:
        PYWITHOUT_MODULES: Comma-separated modules to block at startup.
            Plain names are exact, ``re:<regex>`` is a regex and text
            with ``*``, ``?`` or ``[`` is a glob.
        PYWITHOUT_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL

    Example:
        export PYWITHOUT_MODULES="yaml,re:^numpy(\\.|$),pandas.io.*"

        # In conftest.py
        import pywithout
        pywithout.enable_from_settings()
    """

    model_config = SettingsConfigDict(
        env_prefix="PYWITHOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    modules: str = Field(
        default="",
        description="Comma-separated module names or patterns to block",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the pywithout logger",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        """The log level as a ``logging`` constant."""
        return LOG_LEVELS[self.log_level]

    def matchers(self) -> list[MatcherLike]:
        """
        Parse ``modules`` into matchers.

        Empty items (e.g. from a trailing comma) are skipped.

        Raises:
            ConfigurationError: If an item is not a valid matcher.
        """
        return [parse_matcher(item) for item in self.modules.split(",") if item.strip()]


def load_settings(**overrides: Any) -> BlockerSettings:
    """
    Build settings from the environment, wrapping validation errors.

    Raises:
        ConfigurationError: If an environment value is invalid.
    """
    try:
        return BlockerSettings(**overrides)
    except ValueError as e:
        raise ConfigurationError(f"Invalid pywithout settings: {e}") from e
