"""Configuration de l'application MeetUp."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_SCOPE = "user-read-email user-read-private"
DEFAULT_CACHE_PATH = ".meetup_cache"
DEFAULT_LOG_LEVEL = "INFO"
LOGIN_ROUTE = "/login"
HOME_ROUTE = "/"
_PLACEHOLDER_PREFIX = "VOTRE_"


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Paramètres du fournisseur d'identité et de l'application."""

    client_id: str
    client_secret: str
    redirect_uri: str
    scope: str = DEFAULT_SCOPE
    cache_path: str = DEFAULT_CACHE_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    def credentials_are_configured(self) -> bool:
        """Indique si les identifiants ont été correctement renseignés."""
        return all(
            value and not value.startswith(_PLACEHOLDER_PREFIX)
            for value in (self.client_id, self.client_secret)
        )


def load_config() -> AppConfig:
    """Charge la configuration depuis l'environnement (et un éventuel .env)."""
    load_dotenv()

    return AppConfig(
        client_id=os.getenv("SPOTIFY_CLIENT_ID", "VOTRE_CLIENT_ID"),
        client_secret=os.getenv("SPOTIFY_CLIENT_SECRET", "VOTRE_CLIENT_SECRET"),
        redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI", "http://127.0.0.1:8888/callback"),
        scope=os.getenv("SPOTIFY_SCOPE", DEFAULT_SCOPE),
        cache_path=os.getenv("MEETUP_CACHE_PATH", DEFAULT_CACHE_PATH),
        log_level=os.getenv("MEETUP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
