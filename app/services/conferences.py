"""Conference registry: conference records and the attendee roster.

Mutations resolve the caller first, check membership preconditions, and
commit all of their writes in one transaction. Reads return the views
from ``app.services.projections``.
"""
import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.errors import AlreadyMember, ConferenceNotFound, NotMember
from app.models import Conference, ConferenceAttendee
from app.services.identity import lookup_user, resolve_user
from app.services.projections import (
    ConferenceAttendeeView,
    ConferenceView,
    conference_attendees,
    conference_view,
)

logger = logging.getLogger(__name__)


def find_membership(
    session: Session, conference_id: UUID, user_id: UUID
) -> ConferenceAttendee | None:
    """Attendee row for (conference, user), if any."""
    statement = (
        select(ConferenceAttendee)
        .where(ConferenceAttendee.conference_id == conference_id)
        .where(ConferenceAttendee.user_id == user_id)
    )
    return session.exec(statement).first()


def create_conference(
    session: Session,
    subject: str | None,
    name: str,
    start_date: datetime,
    end_date: datetime,
    description: str | None = None,
) -> UUID:
    """
    Create a conference and enroll its creator as the first attendee.

    Both rows are committed together. Start and end are stored as given;
    no ordering between them is enforced.
    """
    user = resolve_user(session, subject)

    conference = Conference(
        name=name,
        description=description,
        start_date=start_date,
        end_date=end_date,
        created_by=user.id,
    )
    session.add(conference)
    session.flush()
    session.add(ConferenceAttendee(conference_id=conference.id, user_id=user.id))
    session.commit()

    logger.info(f"User {user.id} created conference {conference.id}")
    return conference.id


def join_conference(session: Session, subject: str | None, conference_id: UUID) -> None:
    """
    Add the caller to a conference's attendee roster.

    Raises AlreadyMember if the caller already attends, including when a
    concurrent join wins the race and the unique constraint rejects ours.
    """
    user = resolve_user(session, subject)

    if session.get(Conference, conference_id) is None:
        raise ConferenceNotFound()

    if find_membership(session, conference_id, user.id):
        logger.warning(f"User {user.id} already attends conference {conference_id}")
        raise AlreadyMember()

    session.add(ConferenceAttendee(conference_id=conference_id, user_id=user.id))
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.warning(f"Concurrent join of conference {conference_id} by {user.id}")
        raise AlreadyMember()

    logger.info(f"User {user.id} joined conference {conference_id}")


def leave_conference(session: Session, subject: str | None, conference_id: UUID) -> None:
    """
    Remove the caller from a conference's roster.

    The creator is not special-cased: they may leave and remain the
    creator of record.
    """
    user = resolve_user(session, subject)

    membership = find_membership(session, conference_id, user.id)
    if not membership:
        raise NotMember()

    session.delete(membership)
    session.commit()
    logger.info(f"User {user.id} left conference {conference_id}")


def is_attending(session: Session, subject: str | None, conference_id: UUID) -> bool:
    """True if the caller attends the conference. Never creates a user."""
    user = lookup_user(session, subject)
    if user is None:
        return False
    return find_membership(session, conference_id, user.id) is not None


def get_conference(session: Session, conference_id: UUID) -> ConferenceView:
    conference = session.get(Conference, conference_id)
    if conference is None:
        raise ConferenceNotFound()
    return conference_view(session, conference)


def list_conferences(session: Session) -> list[ConferenceView]:
    """All conferences, most recent start date first."""
    statement = select(Conference).order_by(Conference.start_date.desc())
    return [conference_view(session, c) for c in session.exec(statement).all()]


def list_attendees(session: Session, conference_id: UUID) -> list[ConferenceAttendeeView]:
    return conference_attendees(session, conference_id)
