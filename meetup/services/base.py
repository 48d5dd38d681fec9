"""Contrats des collaborateurs externes du tableau de bord."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Protocol


class IdentityServiceError(RuntimeError):
    """Erreur générique levée par le fournisseur d'identité."""


class IdentityProvider(Protocol):
    def current_identity(self) -> str | None: ...

    def sign_out(self) -> Future[None]: ...


class Navigator(Protocol):
    def go_to(self, route: str) -> None: ...


class MeetingService(Protocol):
    def create_meeting(self, name: str) -> None: ...

    def join_meeting(self, code: str) -> None: ...
