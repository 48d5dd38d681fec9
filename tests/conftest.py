"""Fixtures partagées : faux collaborateurs du tableau de bord."""

from __future__ import annotations

import os
import sys
from concurrent.futures import Future

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class FakeIdentityProvider:
    """Fournisseur d'identité dont la déconnexion est pilotée par le test."""

    def __init__(self, identity: str | None = "alice@example.com") -> None:
        self.identity = identity
        self.sign_out_calls = 0
        self.pending: list[Future] = []

    def current_identity(self) -> str | None:
        return self.identity

    def sign_out(self) -> Future:
        self.sign_out_calls += 1
        future: Future = Future()
        self.pending.append(future)
        return future

    def succeed(self) -> None:
        self.pending[-1].set_result(None)

    def fail(self, exc: BaseException) -> None:
        self.pending[-1].set_exception(exc)


class FakeNavigator:
    def __init__(self) -> None:
        self.routes: list[str] = []

    def go_to(self, route: str) -> None:
        self.routes.append(route)


class FakeMeetingService:
    def __init__(self) -> None:
        self.created: list[str] = []
        self.joined: list[str] = []

    def create_meeting(self, name: str) -> None:
        self.created.append(name)

    def join_meeting(self, code: str) -> None:
        self.joined.append(code)


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def meeting_service() -> FakeMeetingService:
    return FakeMeetingService()
