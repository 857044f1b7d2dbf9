"""User model for identities known to the application.

This module defines the User model. Users are never registered
explicitly: a record is created the first time a verified subject from
the identity provider makes an authenticated request.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """An identity known to the application.

    Attributes:
        id: Unique identifier (UUID).
        external_subject: Subject identifier issued by the identity
            provider (unique). This is the only link to the outside
            identity.
        name: Display name, unset until the profile is completed.
        bio: Free-text biography, optional.
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    external_subject: str = Field(index=True, unique=True)
    name: str | None = Field(default=None, index=True)
    bio: str | None = None
