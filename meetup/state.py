"""Structures d'état partagées entre la couche UI et les services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Session:
    """Vue en lecture seule de la session détenue par le fournisseur d'identité."""

    identity: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Retourne True si un utilisateur est connecté."""
        return self.identity is not None


class OverlayState(Enum):
    """Élément affiché au-dessus du tableau de bord."""

    NONE = "none"
    PROFILE_MENU = "profile_menu"
    CREATE_MODAL = "create_modal"
    JOIN_MODAL = "join_modal"


OVERLAY_KINDS = (
    OverlayState.PROFILE_MENU,
    OverlayState.CREATE_MODAL,
    OverlayState.JOIN_MODAL,
)


class OverlayController:
    """Source unique de vérité pour l'overlay visible.

    Un seul overlay peut être ouvert : en ouvrir un autre ferme le précédent.
    """

    def __init__(self) -> None:
        self._state = OverlayState.NONE

    def current(self) -> OverlayState:
        return self._state

    def toggle(self, target: OverlayState) -> OverlayState:
        """Ouvre ``target`` ou le ferme s'il est déjà affiché."""
        _check_kind(target)
        self._state = OverlayState.NONE if self._state is target else target
        return self._state

    def close(self, target: OverlayState) -> OverlayState:
        """Ferme ``target`` ; sans effet si un autre overlay est actif."""
        _check_kind(target)
        if self._state is target:
            self._state = OverlayState.NONE
        return self._state

    def reset(self) -> OverlayState:
        self._state = OverlayState.NONE
        return self._state


def _check_kind(target: object) -> None:
    if target not in OVERLAY_KINDS:
        raise ValueError(f"Type d'overlay inconnu : {target!r}")
