"""MeetUp : tableau de bord de visioconférence."""

__version__ = "0.1.0"
