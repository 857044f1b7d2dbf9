"""Conference routes: registry operations and per-conference meeting lists."""
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlmodel import Field, Session, SQLModel

from app.core.auth import get_subject
from app.core.database import get_session
from app.services import conferences, meetings
from app.services.projections import (
    ConferenceAttendeeView,
    ConferenceView,
    MeetingSummary,
)

router = APIRouter(prefix="/conferences", tags=["conferences"])


class ConferenceCreate(SQLModel):
    name: str = Field(min_length=1)
    description: str | None = None
    start_date: datetime
    end_date: datetime


class MeetingCreate(SQLModel):
    title: str = Field(min_length=1)
    description: str | None = None
    start_time: datetime
    end_time: datetime
    is_public: bool
    invitee_user_ids: list[UUID] = []


@router.get("", response_model=list[ConferenceView])
async def list_conferences(session: Session = Depends(get_session)):
    """List all conferences with creator names, latest start date first."""
    return conferences.list_conferences(session)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_conference(
    request: ConferenceCreate,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """
    Create a conference.

    The caller becomes the creator and its first attendee in the same commit.
    """
    conference_id = conferences.create_conference(
        session,
        subject,
        name=request.name,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
    )
    return {"id": str(conference_id)}


@router.get("/{conference_id}", response_model=ConferenceView)
async def get_conference(conference_id: UUID, session: Session = Depends(get_session)):
    """Show a single conference. Returns 404 if it does not exist."""
    return conferences.get_conference(session, conference_id)


@router.post("/{conference_id}/join")
async def join_conference(
    conference_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Join a conference. Returns 409 if the caller already attends."""
    conferences.join_conference(session, subject, conference_id)
    return {"success": True}


@router.post("/{conference_id}/leave")
async def leave_conference(
    conference_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Leave a conference. Returns 404 if the caller does not attend."""
    conferences.leave_conference(session, subject, conference_id)
    return {"success": True}


@router.get("/{conference_id}/attending")
async def is_attending(
    conference_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Whether the caller attends. Anonymous callers get false, not an error."""
    return {"attending": conferences.is_attending(session, subject, conference_id)}


@router.get("/{conference_id}/attendees", response_model=list[ConferenceAttendeeView])
async def list_attendees(conference_id: UUID, session: Session = Depends(get_session)):
    return conferences.list_attendees(session, conference_id)


@router.post("/{conference_id}/meetings", status_code=status.HTTP_201_CREATED)
async def create_meeting(
    conference_id: UUID,
    request: MeetingCreate,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """
    Schedule a meeting in this conference.

    Only conference attendees may create meetings. Invitees start out
    pending; the creator is recorded as owner.
    """
    meeting_id = meetings.create_meeting(
        session,
        subject,
        conference_id,
        title=request.title,
        description=request.description,
        start_time=request.start_time,
        end_time=request.end_time,
        is_public=request.is_public,
        invitee_user_ids=request.invitee_user_ids,
    )
    return {"id": str(meeting_id)}


@router.get("/{conference_id}/meetings/public", response_model=list[MeetingSummary])
async def public_meetings(conference_id: UUID, session: Session = Depends(get_session)):
    """Public meetings of the conference with attendee counts."""
    return meetings.get_public_meetings(session, conference_id)


@router.get("/{conference_id}/meetings/mine", response_model=list[MeetingSummary])
async def my_meetings(
    conference_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Meetings of the conference the caller owns, joined or was invited to."""
    return meetings.get_my_meetings(session, subject, conference_id)
