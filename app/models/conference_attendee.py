"""Conference membership model."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ConferenceAttendee(SQLModel, table=True):
    """Membership of a user in a conference.

    Conference membership is binary: a row exists or it does not. The
    composite unique constraint guarantees at most one row per
    (conference, user) even when two joins race.

    Attributes:
        id: Unique identifier (UUID).
        conference_id: Foreign key to the Conference.
        user_id: The attending user.
        joined_at: When the membership was created.
    """
    __table_args__ = (
        UniqueConstraint("conference_id", "user_id", name="uq_conference_attendee"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    conference_id: UUID = Field(foreign_key="conference.id", index=True)
    user_id: UUID = Field(index=True)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
