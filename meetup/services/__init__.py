"""Services externes utilisés par le tableau de bord."""

from meetup.services.base import IdentityProvider, IdentityServiceError, MeetingService, Navigator
from meetup.services.meetings import (
    InvalidMeetingInput,
    LocalMeetingService,
    RecentMeeting,
    format_elapsed,
    validate_meeting_field,
)
from meetup.services.spotify_identity import SpotifyIdentityProvider

__all__ = [
    "IdentityProvider",
    "IdentityServiceError",
    "InvalidMeetingInput",
    "LocalMeetingService",
    "MeetingService",
    "Navigator",
    "RecentMeeting",
    "SpotifyIdentityProvider",
    "format_elapsed",
    "validate_meeting_field",
]
