"""Meeting scheduler: meetings and the invitation state machine.

Every meeting has exactly one ``owner`` row, written in the same commit
as the meeting itself. Other rows start as ``pending`` (invited at
creation) or ``accepted`` (joined a public meeting directly), can be
answered with ``accepted``/``rejected``, and disappear only when their
user leaves. Invitations are only ever issued at creation time.
"""
import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.errors import (
    AlreadyJoined,
    MeetingNotFound,
    MeetingNotPublic,
    NotConferenceMember,
    NotInMeeting,
    NotInvited,
    OwnerCannotLeave,
    OwnerImmutable,
    UserNotFound,
)
from app.models import AttendeeStatus, Meeting, MeetingAttendee, User
from app.services.conferences import find_membership
from app.services.identity import resolve_user
from app.services.projections import (
    MeetingDetail,
    MeetingSummary,
    meeting_detail,
    meeting_summary,
)

logger = logging.getLogger(__name__)

RESPONSE_STATUSES = (AttendeeStatus.ACCEPTED, AttendeeStatus.REJECTED)


def find_attendance(
    session: Session, meeting_id: UUID, user_id: UUID
) -> MeetingAttendee | None:
    """Membership row for (meeting, user), if any."""
    statement = (
        select(MeetingAttendee)
        .where(MeetingAttendee.meeting_id == meeting_id)
        .where(MeetingAttendee.user_id == user_id)
    )
    return session.exec(statement).first()


def create_meeting(
    session: Session,
    subject: str | None,
    conference_id: UUID,
    title: str,
    start_time: datetime,
    end_time: datetime,
    is_public: bool,
    description: str | None = None,
    invitee_user_ids: list[UUID] | None = None,
) -> UUID:
    """
    Schedule a meeting in a conference the caller attends.

    The meeting row, the creator's owner row and one pending row per
    distinct invitee are committed together. Repeated invitee ids and the
    creator's own id are skipped. Every invitee must be an existing user.
    """
    user = resolve_user(session, subject)

    if not find_membership(session, conference_id, user.id):
        logger.warning(f"User {user.id} is not attending conference {conference_id}")
        raise NotConferenceMember(
            "You must be a conference attendee to create meetings"
        )

    invitees = []
    for invitee_id in invitee_user_ids or []:
        if invitee_id == user.id or invitee_id in invitees:
            continue
        if session.get(User, invitee_id) is None:
            raise UserNotFound(f"Invited user {invitee_id} not found")
        invitees.append(invitee_id)

    meeting = Meeting(
        conference_id=conference_id,
        title=title,
        description=description,
        start_time=start_time,
        end_time=end_time,
        is_public=is_public,
        created_by=user.id,
    )
    meeting_id = meeting.id
    session.add(meeting)
    session.flush()

    session.add(
        MeetingAttendee(
            meeting_id=meeting_id, user_id=user.id, status=AttendeeStatus.OWNER
        )
    )
    for invitee_id in invitees:
        session.add(
            MeetingAttendee(
                meeting_id=meeting_id,
                user_id=invitee_id,
                status=AttendeeStatus.PENDING,
            )
        )
    session.commit()

    logger.info(
        f"User {user.id} created {'public' if is_public else 'private'} meeting "
        f"{meeting_id} in conference {conference_id} with {len(invitees)} invitees"
    )
    return meeting_id


def respond_to_invitation(
    session: Session, subject: str | None, meeting_id: UUID, status: AttendeeStatus
) -> None:
    """
    Answer an invitation with ``accepted`` or ``rejected``.

    Raises NotInvited if the caller has no row for the meeting and
    OwnerImmutable if the caller's row is the owner row.
    """
    status = AttendeeStatus(status)
    if status not in RESPONSE_STATUSES:
        raise ValueError(f"Invalid response status: {status.value}")

    user = resolve_user(session, subject)

    attendance = find_attendance(session, meeting_id, user.id)
    if not attendance:
        raise NotInvited()
    if attendance.status == AttendeeStatus.OWNER:
        raise OwnerImmutable()

    attendance.status = status
    session.add(attendance)
    session.commit()
    logger.info(f"User {user.id} responded {status.value} to meeting {meeting_id}")


def join_public_meeting(session: Session, subject: str | None, meeting_id: UUID) -> None:
    """
    Join a public meeting directly as ``accepted``.

    Checked in order: the meeting exists, it is public, the caller attends
    its conference, and the caller has no row for it yet.
    """
    user = resolve_user(session, subject)

    meeting = session.get(Meeting, meeting_id)
    if meeting is None:
        raise MeetingNotFound()
    if not meeting.is_public:
        raise MeetingNotPublic()
    if not find_membership(session, meeting.conference_id, user.id):
        raise NotConferenceMember(
            "You must be a conference attendee to join this meeting"
        )
    if find_attendance(session, meeting_id, user.id):
        raise AlreadyJoined()

    session.add(
        MeetingAttendee(
            meeting_id=meeting_id, user_id=user.id, status=AttendeeStatus.ACCEPTED
        )
    )
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.warning(f"Concurrent join of meeting {meeting_id} by {user.id}")
        raise AlreadyJoined()

    logger.info(f"User {user.id} joined public meeting {meeting_id}")


def leave_meeting(session: Session, subject: str | None, meeting_id: UUID) -> None:
    """Delete the caller's row for a meeting. The owner can never leave."""
    user = resolve_user(session, subject)

    attendance = find_attendance(session, meeting_id, user.id)
    if not attendance:
        raise NotInMeeting()
    if attendance.status == AttendeeStatus.OWNER:
        raise OwnerCannotLeave()

    session.delete(attendance)
    session.commit()
    logger.info(f"User {user.id} left meeting {meeting_id}")


def get_meeting(session: Session, meeting_id: UUID) -> MeetingDetail:
    meeting = session.get(Meeting, meeting_id)
    if meeting is None:
        raise MeetingNotFound()
    return meeting_detail(session, meeting)


def get_public_meetings(session: Session, conference_id: UUID) -> list[MeetingSummary]:
    """Public meetings of a conference in start-time order."""
    statement = (
        select(Meeting)
        .where(Meeting.conference_id == conference_id)
        .where(Meeting.is_public == True)  # noqa: E712
        .order_by(Meeting.start_time)
    )
    return [meeting_summary(session, m) for m in session.exec(statement).all()]


def get_my_meetings(
    session: Session, subject: str | None, conference_id: UUID
) -> list[MeetingSummary]:
    """
    Every meeting in the conference the caller has a row for.

    Owned, accepted, pending and rejected meetings are all included, each
    tagged with the caller's own status.
    """
    user = resolve_user(session, subject)

    statement = select(MeetingAttendee).where(MeetingAttendee.user_id == user.id)
    summaries = []
    for attendance in session.exec(statement).all():
        meeting = session.get(Meeting, attendance.meeting_id)
        if meeting is None or meeting.conference_id != conference_id:
            continue
        summaries.append(meeting_summary(session, meeting, my_status=attendance.status))

    summaries.sort(key=lambda m: m.start_time)
    return summaries
