from app.models.conference import Conference
from app.models.conference_attendee import ConferenceAttendee
from app.models.meeting import Meeting
from app.models.meeting_attendee import AttendeeStatus, MeetingAttendee
from app.models.user import User

__all__ = [
    "User",
    "Conference",
    "ConferenceAttendee",
    "Meeting",
    "MeetingAttendee",
    "AttendeeStatus",
]
