import pytest

from meetup.display_name import FALLBACK_DISPLAY_NAME, avatar_initial, resolve_display_name


class TestResolveDisplayName:
    def test_email_prefix(self):
        assert resolve_display_name("alice@example.com") == "alice"

    def test_splits_on_first_at_only(self):
        assert resolve_display_name("bob@team@example.com") == "bob"

    def test_identity_without_at_is_unchanged(self):
        assert resolve_display_name("spotify-user-42") == "spotify-user-42"

    @pytest.mark.parametrize("identity", [None, "", "@example.com"])
    def test_fallback_is_never_empty(self, identity):
        assert resolve_display_name(identity) == FALLBACK_DISPLAY_NAME
        assert FALLBACK_DISPLAY_NAME

    def test_deterministic(self):
        assert resolve_display_name("carol@x.org") == resolve_display_name("carol@x.org")


class TestAvatarInitial:
    def test_upper_cased_first_letter(self):
        assert avatar_initial("alice") == "A"

    def test_blank_name_uses_fallback(self):
        assert avatar_initial("  ") == FALLBACK_DISPLAY_NAME[0]
