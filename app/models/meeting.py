"""Meeting model.

This module defines the Meeting model, a scheduled sub-event inside a
conference. Public meetings can be joined by any conference attendee;
private meetings are reachable only through an invitation created with
the meeting.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Meeting(SQLModel, table=True):
    """A meeting scheduled within a conference.

    Attributes:
        id: Unique identifier (UUID).
        conference_id: Foreign key to the owning Conference.
        title: Meeting title.
        description: Optional agenda or notes.
        start_time: When the meeting starts.
        end_time: When the meeting ends.
        is_public: True if any conference attendee may join, False if
            the meeting is invite-only.
        created_by: User who created the meeting (and holds the owner row).
    """
    __table_args__ = (
        Index("ix_meeting_conference_start", "conference_id", "start_time"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    conference_id: UUID = Field(foreign_key="conference.id", index=True)
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    is_public: bool = Field(default=False)
    created_by: UUID = Field(index=True)
