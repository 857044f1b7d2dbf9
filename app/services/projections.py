"""Read models assembled from the registry and scheduler tables.

Everything here is derived on every read and nothing is written. Display
names are looked up per row and fall back to ``UNKNOWN_NAME`` when the
referenced user is missing or has no name yet. Attendee counts are
recomputed by scanning the attendee table rather than kept as counters.
"""
from datetime import datetime
from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from app.models import (
    AttendeeStatus,
    Conference,
    ConferenceAttendee,
    Meeting,
    MeetingAttendee,
    User,
)

UNKNOWN_NAME = "Unknown"


class ConferenceView(SQLModel):
    id: UUID
    name: str
    description: str | None = None
    start_date: datetime
    end_date: datetime
    created_by: UUID
    creator_name: str


class ConferenceAttendeeView(SQLModel):
    attendee_id: UUID
    user_id: UUID
    name: str
    bio: str | None = None


class MeetingAttendeeView(SQLModel):
    user_id: UUID
    status: AttendeeStatus
    name: str


class MeetingSummary(SQLModel):
    """A meeting as shown in listings, with aggregate attendee count.

    ``my_status`` is only filled in for the caller's own meetings.
    """
    id: UUID
    conference_id: UUID
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    is_public: bool
    created_by: UUID
    creator_name: str
    attendee_count: int
    my_status: AttendeeStatus | None = None


class MeetingDetail(SQLModel):
    id: UUID
    conference_id: UUID
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    is_public: bool
    created_by: UUID
    creator_name: str
    attendees: list[MeetingAttendeeView]


def display_name(session: Session, user_id: UUID) -> str:
    """Name to show for a user, or "Unknown" if it cannot be resolved."""
    user = session.get(User, user_id)
    if user is None or not user.name:
        return UNKNOWN_NAME
    return user.name


def attendee_count(session: Session, meeting_id: UUID) -> int:
    """Number of membership rows of any status, owner included."""
    statement = (
        select(func.count())
        .select_from(MeetingAttendee)
        .where(MeetingAttendee.meeting_id == meeting_id)
    )
    return session.exec(statement).one()


def conference_view(session: Session, conference: Conference) -> ConferenceView:
    return ConferenceView.model_validate(
        conference,
        update={"creator_name": display_name(session, conference.created_by)},
    )


def conference_attendees(
    session: Session, conference_id: UUID
) -> list[ConferenceAttendeeView]:
    statement = (
        select(ConferenceAttendee)
        .where(ConferenceAttendee.conference_id == conference_id)
        .order_by(ConferenceAttendee.joined_at)
    )
    views = []
    for attendee in session.exec(statement).all():
        user = session.get(User, attendee.user_id)
        views.append(
            ConferenceAttendeeView(
                attendee_id=attendee.id,
                user_id=attendee.user_id,
                name=(user.name if user and user.name else UNKNOWN_NAME),
                bio=user.bio if user else None,
            )
        )
    return views


def meeting_summary(
    session: Session,
    meeting: Meeting,
    my_status: AttendeeStatus | None = None,
) -> MeetingSummary:
    return MeetingSummary.model_validate(
        meeting,
        update={
            "creator_name": display_name(session, meeting.created_by),
            "attendee_count": attendee_count(session, meeting.id),
            "my_status": my_status,
        },
    )


def meeting_detail(session: Session, meeting: Meeting) -> MeetingDetail:
    statement = (
        select(MeetingAttendee)
        .where(MeetingAttendee.meeting_id == meeting.id)
        .order_by(MeetingAttendee.joined_at)
    )
    attendees = [
        MeetingAttendeeView(
            user_id=attendee.user_id,
            status=attendee.status,
            name=display_name(session, attendee.user_id),
        )
        for attendee in session.exec(statement).all()
    ]
    return MeetingDetail.model_validate(
        meeting,
        update={
            "creator_name": display_name(session, meeting.created_by),
            "attendees": attendees,
        },
    )
