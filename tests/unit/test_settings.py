"""
Unit tests for configuration
"""

import pytest

from locale_sync.config import load_config
from locale_sync.config.settings import RunSettings, Settings, TranslatorSettings
from locale_sync.exceptions import ConfigurationError

ENV_VARS = [
    "OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_MODEL", "OPENAI_TIMEOUT",
    "TRANSLATION_MAX_ATTEMPTS", "LOG_LEVEL", "ALLOW_LOCALE_FAILURES",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.translator.api_key is None
        assert settings.translator.model == "gpt-4"
        assert settings.translator.max_attempts == 1
        assert settings.translator.timeout is None
        assert settings.run.log_level == "WARNING"
        assert settings.run.allow_failures is False

    def test_from_env(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-test")
        clean_env.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1")
        clean_env.setenv("OPENAI_MODEL", "gpt-4o")
        clean_env.setenv("OPENAI_TIMEOUT", "30")
        clean_env.setenv("TRANSLATION_MAX_ATTEMPTS", "3")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("ALLOW_LOCALE_FAILURES", "true")

        settings = Settings.from_env()

        assert settings.translator.api_key == "sk-test"
        assert settings.translator.base_url == "http://localhost:8080/v1"
        assert settings.translator.model == "gpt-4o"
        assert settings.translator.timeout == 30.0
        assert settings.translator.max_attempts == 3
        assert settings.run.log_level == "DEBUG"
        assert settings.run.allow_failures is True

    def test_invalid_numbers(self, clean_env):
        clean_env.setenv("TRANSLATION_MAX_ATTEMPTS", "many")

        with pytest.raises(ValueError):
            Settings.from_env()

    @pytest.mark.parametrize("kwargs", [{"model": ""}, {"timeout": 0}, {"max_attempts": 0}])
    def test_invalid_translator_settings(self, kwargs):
        with pytest.raises(ValueError):
            TranslatorSettings(**kwargs)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            RunSettings(log_level="LOUD")


class TestLoadSettings:
    def test_load_is_cached_and_reloadable(self, clean_env):
        clean_env.setenv("OPENAI_MODEL", "gpt-4o")
        first = load_config.reload_settings()

        clean_env.setenv("OPENAI_MODEL", "gpt-4o-mini")
        assert load_config.get_settings() is first
        assert load_config.reload_settings().translator.model == "gpt-4o-mini"

    def test_invalid_configuration_raises_configuration_error(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            load_config.reload_settings()

        clean_env.delenv("LOG_LEVEL")
        load_config.reload_settings()
