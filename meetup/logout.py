"""Déconnexion : fin de session puis redirection vers l'écran de connexion."""

from __future__ import annotations

from concurrent.futures import CancelledError, Future
from dataclasses import dataclass
from typing import Callable

from meetup.config import LOGIN_ROUTE
from meetup.logger import get_logger
from meetup.services.base import IdentityProvider, Navigator

logger = get_logger(__name__)

Dispatch = Callable[[Callable[[], None]], None]


class LogoutError(RuntimeError):
    """Erreur de base du protocole de déconnexion."""


class SignOutFailure(LogoutError):
    """Le fournisseur d'identité n'a pas pu fermer la session."""


@dataclass(frozen=True, slots=True)
class LogoutResult:
    error: LogoutError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


def _sign_out_error(future: Future) -> BaseException | None:
    if future.cancelled():
        return CancelledError("Déconnexion annulée par le fournisseur")
    return future.exception()


class LogoutProtocol:
    """Séquence ``sign_out()`` puis ``go_to(login)``, une seule à la fois.

    La navigation n'a lieu que si la déconnexion a réussi. Un appel reçu
    pendant qu'une déconnexion est en cours renvoie le même résultat en
    attente sans relancer ``sign_out()``. ``dispatch`` ramène la suite du
    traitement sur le thread de l'interface.
    """

    def __init__(self, *, login_route: str = LOGIN_ROUTE, dispatch: Dispatch = _run_inline) -> None:
        self._login_route = login_route
        self._dispatch = dispatch
        self._pending: Future[LogoutResult] | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def execute(self, identity_provider: IdentityProvider, navigator: Navigator) -> Future[LogoutResult]:
        if self.is_pending:
            logger.debug("Déconnexion déjà en cours, requête ignorée")
            return self._pending

        outcome: Future[LogoutResult] = Future()
        outcome.set_running_or_notify_cancel()
        self._pending = outcome

        try:
            sign_out = identity_provider.sign_out()
        except Exception as exc:  # noqa: BLE001
            self._settle(outcome, navigator, exc)
            return outcome

        sign_out.add_done_callback(
            lambda done: self._dispatch(
                lambda: self._settle(outcome, navigator, _sign_out_error(done))
            )
        )
        return outcome

    def _settle(
        self,
        outcome: Future[LogoutResult],
        navigator: Navigator,
        error: BaseException | None,
    ) -> None:
        if error is not None:
            logger.warning("Échec de la déconnexion : %s", error)
            failure = SignOutFailure(f"Échec de la déconnexion : {error}")
            failure.__cause__ = error
            outcome.set_result(LogoutResult(error=failure))
            return

        try:
            navigator.go_to(self._login_route)
        finally:
            outcome.set_result(LogoutResult())
