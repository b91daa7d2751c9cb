"""Tests for settings and callback URL resolution."""

import pytest

from onboarding_bot.config import DEFAULT_PLUGIN_ID, ConfigurationError, Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("KV_BACKEND", raising=False)
        monkeypatch.delenv("BOT_LANGUAGE", raising=False)
        config = _settings()
        assert config.bot_language == "de"
        assert config.kv_backend == "supabase"
        assert config.kv_table == "plugin_kv"
        assert config.plugin_id == DEFAULT_PLUGIN_ID

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BOT_LANGUAGE", "en")
        monkeypatch.setenv("MATTERMOST_URL", "https://chat.example.org")
        config = _settings()
        assert config.bot_language == "en"
        assert config.mattermost_url == "https://chat.example.org"

    def test_environment_flags(self):
        assert _settings(onboarding_env="development").is_development
        assert _settings(onboarding_env="production").is_production


class TestCallbackBaseUrl:

    def test_derived_from_site_url(self):
        config = _settings(mattermost_url="https://chat.example.org/")
        assert config.callback_base_url() == (
            "https://chat.example.org/plugins/com.akinlosotutech.onboardinghelper"
        )

    def test_public_url_wins(self):
        config = _settings(
            mattermost_url="https://chat.example.org",
            public_base_url="https://bot.example.org/",
        )
        assert config.callback_base_url() == "https://bot.example.org"

    def test_missing_site_url(self):
        with pytest.raises(ConfigurationError):
            _settings(mattermost_url="").callback_base_url()

    def test_site_url_without_scheme(self):
        with pytest.raises(ConfigurationError, match="invalid siteURL"):
            _settings(mattermost_url="chat.example.org").callback_base_url()
