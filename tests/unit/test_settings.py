"""
Tests for settings parsing and the derived bot config.
"""

import dataclasses

import pytest

from config.settings import Settings, load_settings
from core import ConfigurationError

REQUIRED = {"TELEGRAM_BOT_TOKEN": "123:abc", "OPENAI_API_KEY": "sk-test"}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ALLOWED_USER_IDS", "PROTECTED_BOT", "REPLY_DELAY_SECONDS", "NOTICE_CANNOT_UNDERSTAND", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)


def make_settings(**overrides):
    return Settings(_env_file=None, **{**REQUIRED, **overrides})


class TestAllowedUserIds:
    def test_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_USER_IDS", "1234567890, 987654321")

        assert make_settings().ALLOWED_USER_IDS == [1234567890, 987654321]

    def test_single_id_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_USER_IDS", "42")

        assert make_settings().ALLOWED_USER_IDS == [42]

    def test_empty_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_USER_IDS", "")

        assert make_settings().ALLOWED_USER_IDS == []

    def test_number_value(self):
        assert make_settings(ALLOWED_USER_IDS=7).ALLOWED_USER_IDS == [7]


class TestBotConfig:
    def test_built_from_settings(self):
        config = make_settings(ALLOWED_USER_IDS="1,2", PROTECTED_BOT=False, REPLY_DELAY_SECONDS=0.5).to_bot_config()

        assert config.bot_token == "123:abc"
        assert config.allowed_user_ids == (1, 2)
        assert config.protected_bot is False
        assert config.reply_delay_seconds == 0.5
        assert config.persona == "friend"

    def test_is_immutable(self):
        config = make_settings().to_bot_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.bot_token = "other"

    def test_defaults(self):
        settings = make_settings()

        assert settings.PROTECTED_BOT is True
        assert settings.REPLY_DELAY_SECONDS == 0.1
        assert settings.TELEGRAM_WEBHOOK_URL == ""


class TestNotices:
    def test_defaults_without_overrides(self):
        notices = make_settings().to_notices()

        assert notices.cannot_understand == "Sorry, I cannot understand"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NOTICE_CANNOT_UNDERSTAND", "Huh?")

        notices = make_settings().to_notices()

        assert notices.cannot_understand == "Huh?"
        assert notices.reading_image == "Reading image"


class TestLoadSettings:
    def test_invalid_database_url_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(_env_file=None, DATABASE_URL="mysql://nope", **REQUIRED)

        assert exc_info.value.context["setting"] == "DATABASE_URL"

    def test_negative_delay_rejected(self):
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, REPLY_DELAY_SECONDS=-1, **REQUIRED)
