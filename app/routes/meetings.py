"""Meeting routes: details, invitation responses, joining and leaving."""
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session, SQLModel

from app.core.auth import get_subject
from app.core.database import get_session
from app.models import AttendeeStatus
from app.services import meetings
from app.services.projections import MeetingDetail

router = APIRouter(prefix="/meetings", tags=["meetings"])


class InvitationResponse(SQLModel):
    status: Literal["accepted", "rejected"]


@router.get("/{meeting_id}", response_model=MeetingDetail)
async def get_meeting(meeting_id: UUID, session: Session = Depends(get_session)):
    """Show a meeting with every attendee's name and status."""
    return meetings.get_meeting(session, meeting_id)


@router.post("/{meeting_id}/respond")
async def respond(
    meeting_id: UUID,
    response: InvitationResponse,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """
    Accept or reject an invitation.

    Returns 404 if the caller was never invited and 403 if the caller owns
    the meeting.
    """
    meetings.respond_to_invitation(
        session, subject, meeting_id, AttendeeStatus(response.status)
    )
    return {"success": True, "status": response.status}


@router.post("/{meeting_id}/join")
async def join_public(
    meeting_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Join a public meeting of a conference the caller attends."""
    meetings.join_public_meeting(session, subject, meeting_id)
    return {"success": True}


@router.post("/{meeting_id}/leave")
async def leave(
    meeting_id: UUID,
    subject: str | None = Depends(get_subject),
    session: Session = Depends(get_session),
):
    """Leave a meeting. The owner cannot leave."""
    meetings.leave_meeting(session, subject, meeting_id)
    return {"success": True}
