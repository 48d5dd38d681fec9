"""Point d'entrée de l'application MeetUp."""

from __future__ import annotations

from meetup.config import load_config
from meetup.logger import setup_logging
from meetup.services import LocalMeetingService, SpotifyIdentityProvider
from meetup.ui.app import MainWindow


def main() -> None:
    """Initialise les dépendances puis lance l'interface Tkinter."""
    config = load_config()
    setup_logging(config.log_level)
    identity_provider = SpotifyIdentityProvider(config)
    meeting_service = LocalMeetingService()
    app = MainWindow(identity_provider=identity_provider, meeting_service=meeting_service)
    app.run()


if __name__ == "__main__":
    main()
