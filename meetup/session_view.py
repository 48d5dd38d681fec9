"""Coordination de l'état du tableau de bord, indépendante de Tkinter."""

from __future__ import annotations

from concurrent.futures import Future

from meetup.display_name import avatar_initial, resolve_display_name
from meetup.logger import get_logger
from meetup.logout import LogoutProtocol, LogoutResult
from meetup.services.base import IdentityProvider, MeetingService, Navigator
from meetup.services.meetings import InvalidMeetingInput, validate_meeting_field
from meetup.state import OverlayController, OverlayState, Session

logger = get_logger(__name__)


class SessionView:
    """Tableau de bord : overlays, nom affiché, réunions et déconnexion.

    Les collaborateurs sont injectés ; la vue ne lit jamais d'état global.
    Toute interaction est ignorée tant qu'une déconnexion est en cours.
    """

    def __init__(
        self,
        identity_provider: IdentityProvider,
        navigator: Navigator,
        meeting_service: MeetingService,
        *,
        overlays: OverlayController | None = None,
        logout_protocol: LogoutProtocol | None = None,
    ) -> None:
        self._identity_provider = identity_provider
        self._navigator = navigator
        self._meetings = meeting_service
        self._overlays = overlays or OverlayController()
        self._logout = logout_protocol or LogoutProtocol()
        self._session = Session()
        self._display_name = resolve_display_name(None)

    # ---------------------------------------------------------------- Lecture -
    @property
    def session(self) -> Session:
        return self._session

    @property
    def identity(self) -> str | None:
        return self._session.identity

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def avatar_initial(self) -> str:
        return avatar_initial(self._display_name)

    @property
    def overlay(self) -> OverlayState:
        return self._overlays.current()

    @property
    def is_logging_out(self) -> bool:
        return self._logout.is_pending

    # ------------------------------------------------------------- Cycle de vie -
    def mount(self) -> None:
        """Relit l'identité courante et ferme tout overlay."""
        self._overlays.reset()
        self._session = Session(identity=self._identity_provider.current_identity())
        self._display_name = resolve_display_name(self._session.identity)

    def unmount(self) -> None:
        self._overlays.reset()

    # ---------------------------------------------------------------- Overlays -
    def _toggle(self, kind: OverlayState) -> OverlayState:
        if self.is_logging_out:
            return self._overlays.current()
        return self._overlays.toggle(kind)

    def toggle_profile_menu(self) -> OverlayState:
        return self._toggle(OverlayState.PROFILE_MENU)

    def toggle_create_modal(self) -> OverlayState:
        return self._toggle(OverlayState.CREATE_MODAL)

    def toggle_join_modal(self) -> OverlayState:
        return self._toggle(OverlayState.JOIN_MODAL)

    def close_create_modal(self) -> OverlayState:
        return self._overlays.close(OverlayState.CREATE_MODAL)

    def close_join_modal(self) -> OverlayState:
        return self._overlays.close(OverlayState.JOIN_MODAL)

    # ---------------------------------------------------------------- Réunions -
    def submit_create(self, name: str) -> bool:
        """Transmet le nom de la réunion ; False si la saisie est refusée."""
        if self.is_logging_out:
            return False
        try:
            cleaned = validate_meeting_field(name, "Nom de la réunion")
        except InvalidMeetingInput as exc:
            logger.info("Création refusée : %s", exc)
            return False
        self._overlays.close(OverlayState.CREATE_MODAL)
        self._meetings.create_meeting(cleaned)
        return True

    def submit_join(self, code: str) -> bool:
        """Transmet le code de la réunion ; False si la saisie est refusée."""
        if self.is_logging_out:
            return False
        try:
            cleaned = validate_meeting_field(code, "Code de la réunion")
        except InvalidMeetingInput as exc:
            logger.info("Participation refusée : %s", exc)
            return False
        self._overlays.close(OverlayState.JOIN_MODAL)
        self._meetings.join_meeting(cleaned)
        return True

    # ------------------------------------------------------------- Déconnexion -
    def logout(self) -> Future[LogoutResult]:
        already_pending = self.is_logging_out
        outcome = self._logout.execute(self._identity_provider, self._navigator)
        if not already_pending:
            outcome.add_done_callback(self._on_logout_done)
        return outcome

    def _on_logout_done(self, outcome: Future[LogoutResult]) -> None:
        if outcome.result().ok:
            self._overlays.reset()
            self._session = Session()
            self._display_name = resolve_display_name(None)
