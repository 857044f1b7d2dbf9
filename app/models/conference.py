"""Conference model.

This module defines the Conference model, a time-bounded event that owns
an attendee roster and any number of meetings. Conferences are immutable
once created.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Conference(SQLModel, table=True):
    """A conference created by a user.

    No ordering is enforced between ``start_date`` and ``end_date``.

    Attributes:
        id: Unique identifier (UUID).
        name: Conference name.
        description: Optional longer description.
        start_date: When the conference starts.
        end_date: When the conference ends.
        created_by: User who created the conference. Not a foreign key:
            the creator may later be deleted, in which case read models
            show the creator as "Unknown".
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    description: str | None = None
    start_date: datetime = Field(index=True)
    end_date: datetime
    created_by: UUID = Field(index=True)
