"""Meeting membership and invitation model.

A MeetingAttendee row links a user to a meeting and records where that
user stands in the invitation lifecycle:

    owner      created with the meeting for its creator; never changes
    pending    invited at meeting creation, not yet answered
    accepted   answered yes, or joined a public meeting directly
    rejected   answered no

Only ``pending`` rows are meant to be answered, although an answered row
may be answered again. Rows are removed only by the user leaving.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class AttendeeStatus(str, Enum):
    """Status of a user's membership in a meeting."""

    OWNER = "owner"
    ACCEPTED = "accepted"
    PENDING = "pending"
    REJECTED = "rejected"


class MeetingAttendee(SQLModel, table=True):
    """Membership of a user in a meeting.

    Attributes:
        id: Unique identifier (UUID).
        meeting_id: Foreign key to the Meeting.
        user_id: The invited or attending user.
        status: Position in the invitation lifecycle.
        joined_at: When the row was created.
    """
    __table_args__ = (
        UniqueConstraint("meeting_id", "user_id", name="uq_meeting_attendee"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    meeting_id: UUID = Field(foreign_key="meeting.id", index=True)
    user_id: UUID = Field(index=True)
    status: AttendeeStatus = Field(default=AttendeeStatus.PENDING)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
