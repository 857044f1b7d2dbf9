"""Error taxonomy for membership and invitation operations.

Every failure a caller can see is a subclass of ``SchedulingError``. Each
class carries a stable ``kind`` (machine-distinguishable, used by the UI
to pick a message) and an HTTP status used when the error crosses the
API boundary. Services raise these before staging any write, so a failed
mutation never leaves partial state behind.
"""


class SchedulingError(Exception):
    """Base class for caller-visible scheduling failures."""

    kind = "SchedulingError"
    status_code = 400
    message = "Request could not be completed"

    def __init__(self, message: str | None = None):
        self.detail = message or self.message
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.detail}


class Unauthenticated(SchedulingError):
    kind = "Unauthenticated"
    status_code = 401
    message = "Not authenticated"


# Duplicate membership


class AlreadyMember(SchedulingError):
    kind = "AlreadyMember"
    status_code = 409
    message = "Already joined this conference"


class AlreadyJoined(SchedulingError):
    kind = "AlreadyJoined"
    status_code = 409
    message = "Already joined this meeting"


# Missing membership rows


class NotMember(SchedulingError):
    kind = "NotMember"
    status_code = 404
    message = "Not a member of this conference"


class NotInMeeting(SchedulingError):
    kind = "NotInMeeting"
    status_code = 404
    message = "You are not part of this meeting"


class NotInvited(SchedulingError):
    kind = "NotInvited"
    status_code = 404
    message = "You are not invited to this meeting"


# Rule violations


class NotConferenceMember(SchedulingError):
    kind = "NotConferenceMember"
    status_code = 403
    message = "You must be a conference attendee to do this"


class OwnerImmutable(SchedulingError):
    kind = "OwnerImmutable"
    status_code = 403
    message = "Cannot change owner status"


class OwnerCannotLeave(SchedulingError):
    kind = "OwnerCannotLeave"
    status_code = 403
    message = "Meeting owner cannot leave the meeting"


class MeetingNotPublic(SchedulingError):
    kind = "MeetingNotPublic"
    status_code = 403
    message = "This meeting is not public"


class TestingDisabled(SchedulingError):
    kind = "TestingDisabled"
    status_code = 403
    message = "Calling a test-only function in non-test environment"


# Missing targets


class MeetingNotFound(SchedulingError):
    kind = "MeetingNotFound"
    status_code = 404
    message = "Meeting not found"


class ConferenceNotFound(SchedulingError):
    kind = "ConferenceNotFound"
    status_code = 404
    message = "Conference not found"


class UserNotFound(SchedulingError):
    kind = "UserNotFound"
    status_code = 404
    message = "User not found"


class InvalidProfile(SchedulingError):
    kind = "InvalidProfile"
    status_code = 400
    message = "Display name cannot be blank"
