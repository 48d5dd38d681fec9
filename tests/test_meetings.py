import re
from datetime import datetime, timedelta, timezone

import pytest

from meetup.services.meetings import (
    InvalidMeetingInput,
    LocalMeetingService,
    format_elapsed,
    generate_meeting_code,
    validate_meeting_field,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def build_service(**kwargs) -> LocalMeetingService:
    codes = iter(f"code-{i}" for i in range(100))
    return LocalMeetingService(clock=lambda: NOW, code_factory=lambda: next(codes), **kwargs)


class TestValidation:
    def test_trims(self):
        assert validate_meeting_field("  Stand-up  ", "Nom") == "Stand-up"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None])
    def test_blank_is_rejected(self, value):
        with pytest.raises(InvalidMeetingInput):
            validate_meeting_field(value, "Nom")

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidMeetingInput, ValueError)


class TestLocalMeetingService:
    def test_created_meeting_is_listed_first(self):
        service = build_service()
        service.create_meeting("Stand-up")
        service.create_meeting("Rétro")

        recent = service.recent()
        assert [m.title for m in recent] == ["Rétro", "Stand-up"]
        assert recent[0].code == "code-1"
        assert recent[0].created_at == NOW

    def test_join_reuses_known_title_and_moves_to_front(self):
        service = build_service()
        service.create_meeting("Stand-up")
        service.create_meeting("Rétro")

        service.join_meeting("code-0")

        recent = service.recent()
        assert [m.code for m in recent] == ["code-0", "code-1"]
        assert recent[0].title == "Stand-up"

    def test_join_unknown_code_uses_code_as_title(self):
        service = build_service()
        service.join_meeting("xyz-123")

        assert service.recent()[0].title == "xyz-123"

    def test_history_is_capped(self):
        service = build_service(max_recent=2)
        for name in ("a", "b", "c"):
            service.create_meeting(name)

        assert [m.title for m in service.recent()] == ["c", "b"]

    def test_blank_name_is_rejected(self):
        service = build_service()
        with pytest.raises(InvalidMeetingInput):
            service.create_meeting(" ")
        assert service.recent() == []

    def test_recent_returns_copy(self):
        service = build_service()
        service.create_meeting("a")
        service.recent().clear()

        assert len(service.recent()) == 1


class TestMeetingCode:
    def test_format(self):
        assert re.fullmatch(r"[a-z2-9]{3}-[a-z2-9]{3}-[a-z2-9]{3}", generate_meeting_code())


class TestFormatElapsed:
    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=10), "à l'instant"),
            (timedelta(minutes=5), "il y a 5 min"),
            (timedelta(hours=2, minutes=30), "il y a 2 h"),
            (timedelta(days=3), "il y a 3 j"),
            (timedelta(seconds=-30), "à l'instant"),
        ],
    )
    def test_labels(self, delta, expected):
        assert format_elapsed(NOW - delta, now=NOW) == expected
