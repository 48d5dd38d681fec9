"""Réunions récentes, gardées en mémoire le temps de la session."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from meetup.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_RECENT = 12
_CODE_ALPHABET = "abcdefghijkmnpqrstuvwxyz23456789"
_CODE_LENGTH = 9


class InvalidMeetingInput(ValueError):
    """Nom ou code de réunion vide."""


def validate_meeting_field(value: str, label: str) -> str:
    """Retourne ``value`` sans espaces superflus ou lève InvalidMeetingInput."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidMeetingInput(f"Le champ « {label} » ne peut pas être vide.")
    return cleaned


@dataclass(frozen=True, slots=True)
class CreateMeetingRequest:
    name: str


@dataclass(frozen=True, slots=True)
class JoinMeetingRequest:
    code: str


@dataclass(frozen=True, slots=True)
class RecentMeeting:
    title: str
    code: str
    created_at: datetime


def generate_meeting_code() -> str:
    """Code lisible du type ``abc-def-ghi``."""
    raw = "".join(secrets.choice(_CODE_ALPHABET) for _ in range(_CODE_LENGTH))
    return "-".join(raw[i : i + 3] for i in range(0, _CODE_LENGTH, 3))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocalMeetingService:
    """Enregistre les demandes de création et de participation.

    Aucun transport réseau : chaque demande alimente la liste des réunions
    récentes, la plus récente en premier.
    """

    def __init__(
        self,
        *,
        max_recent: int = DEFAULT_MAX_RECENT,
        clock: Callable[[], datetime] = _utcnow,
        code_factory: Callable[[], str] = generate_meeting_code,
    ) -> None:
        self._max_recent = max(1, max_recent)
        self._clock = clock
        self._code_factory = code_factory
        self._recent: list[RecentMeeting] = []

    def create_meeting(self, name: str) -> None:
        request = CreateMeetingRequest(name=validate_meeting_field(name, "Nom de la réunion"))
        meeting = RecentMeeting(title=request.name, code=self._code_factory(), created_at=self._clock())
        logger.info("Réunion créée : %s (%s)", meeting.title, meeting.code)
        self._remember(meeting)

    def join_meeting(self, code: str) -> None:
        request = JoinMeetingRequest(code=validate_meeting_field(code, "Code de la réunion"))
        title = next(
            (meeting.title for meeting in self._recent if meeting.code == request.code),
            request.code,
        )
        logger.info("Participation à la réunion %s", request.code)
        self._remember(RecentMeeting(title=title, code=request.code, created_at=self._clock()))

    def _remember(self, meeting: RecentMeeting) -> None:
        self._recent = [m for m in self._recent if m.code != meeting.code]
        self._recent.insert(0, meeting)
        del self._recent[self._max_recent :]

    def recent(self) -> list[RecentMeeting]:
        return list(self._recent)


def format_elapsed(moment: datetime, now: datetime | None = None) -> str:
    """Durée écoulée en français, pour les cartes de réunion."""
    now = now or _utcnow()
    seconds = max(0, int((now - moment).total_seconds()))
    if seconds < 60:
        return "à l'instant"
    minutes = seconds // 60
    if minutes < 60:
        return f"il y a {minutes} min"
    hours = minutes // 60
    if hours < 24:
        return f"il y a {hours} h"
    return f"il y a {hours // 24} j"
