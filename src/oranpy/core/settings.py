"""Settings for oranpy.

The library functions take no configuration; settings only steer the
ambient concerns (log level and format) of applications built on oranpy,
including the ``oranpy`` CLI.

Fields
──────
log_level    : Structlog log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
log_json     : True for JSON logs, False for console, unset to auto-detect
debug        : Force DEBUG logging

All fields can be set via ``ORANPY_*`` environment variables (e.g.
``ORANPY_LOG_LEVEL=debug``) or through a ``.env`` file.

Tags:
    settings, configuration, pydantic, environment, oranpy

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OranSettings(BaseSettings):
    """Process-wide oranpy settings read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="ORANPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the ``debug`` override."""
        return "DEBUG" if self.debug else self.log_level


_settings_cache: dict[str, OranSettings] = {}


def get_settings(*, _force_reload: bool = False) -> OranSettings:
    """Load, validate, and cache an :class:`OranSettings` instance.

    Parameters
    ----------
    _force_reload:
        Bypass cache and re-read the environment.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = OranSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (used by tests)."""
    _settings_cache.clear()


__all__ = ["OranSettings", "get_settings", "clear_settings_cache"]
