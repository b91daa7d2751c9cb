"""
Onboarding Helper - Configuration and settings.

All settings come from environment variables (or a .env file).
The bot identity is NOT configured here; it is resolved once at startup
from the bot token (see onboarding_bot.bot).
"""

from functools import lru_cache
from typing import Literal
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLUGIN_ID = "com.akinlosotutech.onboardinghelper"


class ConfigurationError(Exception):
    """A setting required for the requested operation is missing or invalid."""


class Settings(BaseSettings):
    """
    Service settings.

    Mattermost connection, storage backend and display language.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Mattermost
    mattermost_url: str = ""
    mattermost_bot_token: str = ""
    plugin_id: str = DEFAULT_PLUGIN_ID
    http_timeout_seconds: float = 10.0

    # Where the platform delivers button/dialog callbacks.
    # Empty -> <mattermost_url>/plugins/<plugin_id>
    public_base_url: str = ""

    # Display language for all bot messages
    bot_language: str = "de"

    # Key-value storage
    kv_backend: Literal["supabase", "memory"] = "supabase"
    kv_table: str = "plugin_kv"
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None

    # Bot profile (applied best-effort at startup)
    bot_display_name: str = "EOTO Onboarding Helper"
    bot_description: str = "Guides new teammates through onboarding."
    bot_icon_path: str = "assets/icon.png"

    # Application
    onboarding_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def is_development(self) -> bool:
        return self.onboarding_env == "development"

    @property
    def is_production(self) -> bool:
        return self.onboarding_env == "production"

    def callback_base_url(self) -> str:
        """
        Base URL that interactive buttons and dialogs post back to.

        Raises:
            ConfigurationError: Neither PUBLIC_BASE_URL nor MATTERMOST_URL is set
        """
        if self.public_base_url:
            return self.public_base_url.rstrip("/")

        if not self.mattermost_url:
            raise ConfigurationError("siteURL is not configured")

        if not self.mattermost_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"invalid siteURL: {self.mattermost_url}")

        return f"{self.mattermost_url.rstrip('/')}/plugins/{quote(self.plugin_id)}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: Settings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
