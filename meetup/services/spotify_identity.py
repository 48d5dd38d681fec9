"""Fournisseur d'identité basé sur le compte Spotify de l'utilisateur."""

from __future__ import annotations

import os
import subprocess
import sys
import webbrowser
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any
from urllib.parse import urlparse

import spotipy
from spotipy.oauth2 import SpotifyOAuth
from spotipy.util import get_host_port

from meetup.config import AppConfig, ConfigError
from meetup.logger import get_logger
from meetup.services.base import IdentityServiceError

logger = get_logger(__name__)


def _open_url_with_system_browser(url: str) -> None:
    """Ouvre une URL avec l'outil système adapté à l'environnement."""
    if "WSL_DISTRO_NAME" in os.environ:
        try:
            subprocess.run(["wslview", url], check=False)
            return
        except FileNotFoundError:
            pass

    if sys.platform.startswith("linux"):
        try:
            subprocess.run(["xdg-open", url], check=False)
            return
        except FileNotFoundError:
            pass

    try:
        webbrowser.open(url)
    except webbrowser.Error:
        logger.warning("Impossible d'ouvrir le navigateur pour %s", url)


class BrowserOAuth(SpotifyOAuth):
    """OAuth ouvrant le navigateur système et écoutant sur le port local."""

    def _open_auth_url(self) -> None:
        _open_url_with_system_browser(self.get_authorize_url())

    def get_auth_response(self, open_browser=None):
        redirect_info = urlparse(self.redirect_uri)
        redirect_host, redirect_port = get_host_port(redirect_info.netloc)

        if (
            redirect_info.scheme == "http"
            and redirect_host in ("127.0.0.1", "localhost")
            and redirect_port
        ):
            try:
                return self._get_auth_response_local_server(redirect_port)
            except Exception:  # noqa: BLE001
                logger.debug("Serveur local indisponible, saisie manuelle de l'URL")

        return super().get_auth_response(open_browser=open_browser)


def _identity_from_profile(profile: dict[str, Any]) -> str | None:
    return profile.get("email") or profile.get("id")


class SpotifyIdentityProvider:
    """Connexion, identité courante et déconnexion asynchrone."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._client: spotipy.Spotify | None = None
        self._identity: str | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="meetup-auth")

    @property
    def is_authenticated(self) -> bool:
        return self._client is not None

    def current_identity(self) -> str | None:
        return self._identity

    def _build_auth_manager(self, *, open_browser: bool) -> SpotifyOAuth:
        return BrowserOAuth(
            client_id=self._config.client_id,
            client_secret=self._config.client_secret,
            redirect_uri=self._config.redirect_uri,
            scope=self._config.scope,
            open_browser=open_browser,
            cache_path=self._config.cache_path,
        )

    def try_authenticate_from_cache(self) -> str | None:
        """Tente une connexion silencieuse à partir du jeton en cache.

        Retourne l'identité si le jeton est valide, None sinon.
        """
        if not self._config.credentials_are_configured():
            return None
        if not os.path.exists(self._config.cache_path):
            return None

        try:
            client = spotipy.Spotify(auth_manager=self._build_auth_manager(open_browser=False))
            profile = client.current_user()
        except Exception:  # noqa: BLE001
            logger.info("Jeton en cache invalide ou expiré")
            return None

        self._client = client
        self._identity = _identity_from_profile(profile)
        return self._identity

    def authenticate(self) -> str | None:
        """Ouvre le parcours de connexion et retourne l'identité obtenue."""
        if not self._config.credentials_are_configured():
            raise ConfigError(
                "Les identifiants ne sont pas configurés. "
                "Définissez SPOTIFY_CLIENT_ID et SPOTIFY_CLIENT_SECRET."
            )

        try:
            client = spotipy.Spotify(auth_manager=self._build_auth_manager(open_browser=True))
            profile = client.current_user()
        except spotipy.exceptions.SpotifyException as exc:
            raise IdentityServiceError("Erreur du fournisseur lors de l'authentification.") from exc
        except Exception as exc:  # noqa: BLE001
            raise IdentityServiceError("Échec de l'authentification.") from exc

        self._client = client
        self._identity = _identity_from_profile(profile)
        logger.info("Connecté en tant que %s", self._identity)
        return self._identity

    def sign_out(self) -> Future[None]:
        """Déconnecte l'utilisateur en arrière-plan."""
        return self._executor.submit(self._sign_out)

    def _sign_out(self) -> None:
        try:
            os.remove(self._config.cache_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise IdentityServiceError("Impossible de supprimer le jeton en cache.") from exc

        self._client = None
        self._identity = None

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)
