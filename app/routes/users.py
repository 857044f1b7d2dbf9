"""User profile routes."""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session, SQLModel

from app.core.auth import get_subject
from app.core.database import get_session
from app.services import identity

router = APIRouter(prefix="/users", tags=["users"])


class UserProfile(SQLModel):
    id: UUID
    external_subject: str
    name: str | None = None
    bio: str | None = None


class ProfileUpdate(SQLModel):
    name: str | None = None
    bio: str | None = None


@router.get("/me", response_model=UserProfile)
async def current_user(
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """
    Return the caller's profile.

    The user record is created on the first authenticated request, so a
    new subject gets a profile with no name or bio.
    """
    return UserProfile.model_validate(identity.resolve_user(session, subject))


@router.post("/me", response_model=UserProfile)
async def update_profile(
    update: ProfileUpdate,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Set the caller's display name and/or bio."""
    user = identity.update_profile(session, subject, name=update.name, bio=update.bio)
    return UserProfile.model_validate(user)
