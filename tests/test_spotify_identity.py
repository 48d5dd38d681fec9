import os
from concurrent.futures import Future
from unittest.mock import MagicMock, patch

import pytest

from meetup.config import AppConfig, ConfigError
from meetup.services.base import IdentityServiceError
from meetup.services.spotify_identity import SpotifyIdentityProvider


@pytest.fixture
def config(tmp_path):
    return AppConfig(
        client_id="id",
        client_secret="secret",
        redirect_uri="http://127.0.0.1:8888/callback",
        cache_path=str(tmp_path / "token_cache"),
    )


@pytest.fixture
def provider(config):
    instance = SpotifyIdentityProvider(config)
    yield instance
    instance.shutdown()


def fake_client(profile):
    client = MagicMock()
    client.current_user.return_value = profile
    return client


class TestAuthenticate:
    def test_missing_credentials(self, tmp_path):
        config = AppConfig(client_id="VOTRE_CLIENT_ID", client_secret="x", redirect_uri="http://localhost")
        provider = SpotifyIdentityProvider(config)
        try:
            with pytest.raises(ConfigError):
                provider.authenticate()
        finally:
            provider.shutdown()

    def test_identity_is_email(self, provider):
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value = fake_client({"id": "alice42", "email": "alice@example.com"})
            assert provider.authenticate() == "alice@example.com"

        assert provider.is_authenticated
        assert provider.current_identity() == "alice@example.com"

    def test_identity_falls_back_to_account_id(self, provider):
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value = fake_client({"id": "alice42"})
            assert provider.authenticate() == "alice42"

    def test_provider_error_is_wrapped(self, provider):
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value.current_user.side_effect = RuntimeError("refused")
            with pytest.raises(IdentityServiceError):
                provider.authenticate()

        assert not provider.is_authenticated


class TestCache:
    def test_no_cache_file(self, provider):
        assert provider.try_authenticate_from_cache() is None

    def test_valid_cache(self, provider, config):
        open(config.cache_path, "w").close()
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value = fake_client({"id": "bob", "email": "bob@example.com"})
            assert provider.try_authenticate_from_cache() == "bob@example.com"

    def test_invalid_cache(self, provider, config):
        open(config.cache_path, "w").close()
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value.current_user.side_effect = RuntimeError("expired")
            assert provider.try_authenticate_from_cache() is None


class TestSignOut:
    def test_sign_out_clears_identity_and_cache(self, provider, config):
        open(config.cache_path, "w").close()
        with patch("meetup.services.spotify_identity.spotipy.Spotify") as spotify:
            spotify.return_value = fake_client({"email": "alice@example.com"})
            provider.authenticate()

        future = provider.sign_out()

        assert isinstance(future, Future)
        assert future.result(timeout=5) is None
        assert provider.current_identity() is None
        assert not provider.is_authenticated
        assert not os.path.exists(config.cache_path)

    def test_sign_out_without_cache_succeeds(self, provider):
        assert provider.sign_out().result(timeout=5) is None

    def test_sign_out_failure_is_reported_by_future(self, provider):
        with patch("meetup.services.spotify_identity.os.remove", side_effect=PermissionError("denied")):
            future = provider.sign_out()
            with pytest.raises(IdentityServiceError):
                future.result(timeout=5)
