"""
SDK settings.

Values come from keyword overrides, then ``PTERO_*`` environment variables,
then the defaults below.

Example:
    >>> from ptero.config import get_settings
    >>> settings = get_settings()
    >>> settings.poll_interval
    5.0
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptero.exceptions import ConfigurationError
from ptero.models.target import PanelTarget

DEFAULT_POLL_INTERVAL = 5.0
MAX_POLL_INTERVAL = 3600.0
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB


class PanelSettings(BaseSettings):
    """Settings for the ptero SDK and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PTERO_",
        extra="ignore",
    )

    # Target panel
    panel_url: str | None = None
    api_key: str | None = Field(default=None, repr=False)

    # Backup waiting
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL, ge=0.0, le=MAX_POLL_INTERVAL)

    # HTTP
    request_timeout: float | None = Field(default=None, gt=0.0)
    download_chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1024)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    def target(self) -> PanelTarget:
        """
        Build the target descriptor from ``panel_url`` and ``api_key``.

        Raises:
            ConfigurationError: If either value is missing
        """
        if not self.panel_url:
            raise ConfigurationError(
                "Panel URL required. Pass --url or set PTERO_PANEL_URL environment variable."
            )
        if not self.api_key:
            raise ConfigurationError(
                "API key required. Pass --api-key or set PTERO_API_KEY environment variable."
            )
        return PanelTarget(base_url=self.panel_url, api_key=self.api_key)


def validate_poll_interval(value: float) -> float:
    """
    Check a poll interval given outside of settings.

    Raises:
        ConfigurationError: If the interval is outside 0..3600 seconds
    """
    if not 0.0 <= value <= MAX_POLL_INTERVAL:
        raise ConfigurationError(
            f"poll_interval must be between 0 and {MAX_POLL_INTERVAL:g} seconds, got {value:g}"
        )
    return value


_settings: PanelSettings | None = None


def get_settings() -> PanelSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = PanelSettings()
    return _settings


def configure_settings(**overrides: Any) -> PanelSettings:
    """Replace the process-wide settings with a new instance built from overrides."""
    global _settings
    _settings = PanelSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings`` reloads them."""
    global _settings
    _settings = None


__all__ = [
    "PanelSettings",
    "get_settings",
    "configure_settings",
    "reset_settings",
    "validate_poll_interval",
    "DEFAULT_POLL_INTERVAL",
    "MAX_POLL_INTERVAL",
    "DEFAULT_CHUNK_SIZE",
]
