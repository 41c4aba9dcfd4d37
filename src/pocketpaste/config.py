# Settings — environment / .env backed configuration.
# Created: 2026-10-12
#
# The three Pastebin secrets keep their historical bare names
# (API_PASTEBIN, PASTEBIN_USER_NAME, PASTEBIN_PASSWORD) and also accept
# the POCKETPASTE_ prefixed form.

from __future__ import annotations

import logging

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_settings: Settings | None = None


class Settings(BaseSettings):
    """PocketPaste settings."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETPASTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    pastebin_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("API_PASTEBIN", "POCKETPASTE_PASTEBIN_API_KEY"),
        description="Pastebin developer API key",
    )
    pastebin_user_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PASTEBIN_USER_NAME", "POCKETPASTE_PASTEBIN_USER_NAME"),
        description="Pastebin account user name",
    )
    pastebin_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PASTEBIN_PASSWORD", "POCKETPASTE_PASTEBIN_PASSWORD"),
        description="Pastebin account password",
    )
    pastebin_base_url: str = Field(
        default="https://pastebin.com/",
        description="Base URL all API paths are resolved against",
    )
    log_level: str = Field(default="INFO", description="Console log level")

    @property
    def has_credentials(self) -> bool:
        """True when both account user name and password are configured."""
        return bool(self.pastebin_user_name and self.pastebin_password)


def get_settings(force_reload: bool = False) -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None or force_reload:
        _settings = Settings()
        logger.debug("Loaded settings (base_url=%s)", _settings.pastebin_base_url)
    return _settings
