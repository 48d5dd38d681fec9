from unittest.mock import patch

import pytest

from meetup.config import DEFAULT_CACHE_PATH, DEFAULT_SCOPE, AppConfig, load_config

ENV_KEYS = (
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REDIRECT_URI",
    "SPOTIFY_SCOPE",
    "MEETUP_CACHE_PATH",
    "MEETUP_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    with patch("meetup.config.load_dotenv"):
        yield monkeypatch


class TestLoadConfig:
    def test_defaults_are_placeholders(self, clean_env):
        config = load_config()

        assert config.scope == DEFAULT_SCOPE
        assert config.cache_path == DEFAULT_CACHE_PATH
        assert config.log_level == "INFO"
        assert not config.credentials_are_configured()

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SPOTIFY_CLIENT_ID", "id")
        clean_env.setenv("SPOTIFY_CLIENT_SECRET", "secret")
        clean_env.setenv("MEETUP_CACHE_PATH", "/tmp/cache")
        clean_env.setenv("MEETUP_LOG_LEVEL", "debug")

        config = load_config()

        assert config.credentials_are_configured()
        assert config.cache_path == "/tmp/cache"
        assert config.log_level == "DEBUG"


class TestCredentials:
    def test_empty_secret_is_not_configured(self):
        config = AppConfig(client_id="id", client_secret="", redirect_uri="http://127.0.0.1:8888/callback")
        assert not config.credentials_are_configured()
