"""Crawler settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.  Every
value has a default matching the published portal layout, so a bare run
needs no environment at all.  Variables use the ``RTUK_`` prefix, e.g.
``RTUK_OUTPUT_DIR=/srv/rtuk``.

Usage::

    from rtuk_licenses.config.settings import get_settings

    settings = get_settings()
    path = settings.internet_stream_path
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rtuk_licenses.scraper.config import (
    DEFAULT_TIMEOUT,
    INTERNET_STREAM_LICENSE_URL,
    SATELLITE_BROADCASTING_LICENSE_URL,
)


class Settings(BaseSettings):
    """Run configuration backed by environment variables and an optional .env file.

    The orchestrator receives an instance explicitly; nothing else in the
    package reads the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="RTUK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    internet_stream_url: str = INTERNET_STREAM_LICENSE_URL
    """Result endpoint of the internet broadcast (platform) license query."""

    satellite_url: str = SATELLITE_BROADCASTING_LICENSE_URL
    """Result endpoint of the satellite license query (TV and radio)."""

    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Per-request HTTP timeout in seconds."""

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    output_dir: Path = Path("./datas")
    """Directory receiving the JSON files.  Created on startup if absent."""

    internet_stream_filename: str = "internetStreamLicense.json"

    satellite_tv_filename: str = "satelliteBroadcastingLicenseTV.json"

    satellite_radio_filename: str = "satelliteBroadcastingLicenseRadio.json"

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Root log level passed to ``configure_logging``."""

    @property
    def internet_stream_path(self) -> Path:
        return self.output_dir / self.internet_stream_filename

    @property
    def satellite_tv_path(self) -> Path:
        return self.output_dir / self.satellite_tv_filename

    @property
    def satellite_radio_path(self) -> Path:
        return self.output_dir / self.satellite_radio_filename


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    In tests, call ``get_settings.cache_clear()`` after patching environment
    variables.
    """
    return Settings()
