"""Identity resolution: verified subject -> internal user record.

The identity provider is external. By the time a request reaches the
application the caller's subject has already been verified; this module
only maps that subject onto a User row, creating the row the first time
the subject is seen. It is the single trust boundary for every mutation.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.config import settings
from app.core.errors import InvalidProfile, TestingDisabled, Unauthenticated
from app.models import User

logger = logging.getLogger(__name__)


def lookup_user(session: Session, subject: str | None) -> User | None:
    """Find the user for a subject without creating one."""
    if not subject:
        return None
    return session.exec(select(User).where(User.external_subject == subject)).first()


def resolve_user(session: Session, subject: str | None) -> User:
    """
    Return the user for a verified subject, creating it on first sight.

    Raises Unauthenticated when no subject is present. A known subject
    whose profile was never completed resolves normally with an unset name.
    """
    if not subject:
        raise Unauthenticated()

    user = lookup_user(session, subject)
    if user:
        return user

    user = User(external_subject=subject)
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # A concurrent request created the same subject first
        session.rollback()
        user = lookup_user(session, subject)
        if user is None:
            raise
        return user

    session.refresh(user)
    logger.info(f"Created user {user.id} for new subject")
    return user


def update_profile(
    session: Session,
    subject: str | None,
    name: str | None = None,
    bio: str | None = None,
) -> User:
    """Set the caller's display name and/or bio. Omitted fields are kept."""
    user = resolve_user(session, subject)

    if name is not None:
        name = name.strip()
        if not name:
            raise InvalidProfile()
        user.name = name
    if bio is not None:
        user.bio = bio.strip() or None

    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(f"Updated profile for user {user.id}")
    return user


def delete_test_user(session: Session, name: str) -> bool:
    """
    Delete the first user with the given display name.

    Test-support only: refuses unless IS_TEST is enabled. Rows that
    reference the user are left in place and render as "Unknown".
    Returns True if a user was deleted.
    """
    if not settings.is_test:
        raise TestingDisabled()

    user = session.exec(select(User).where(User.name == name)).first()
    if not user:
        return False

    user_id = user.id
    session.delete(user)
    session.commit()
    logger.info(f"Deleted test user {user_id}")
    return True
