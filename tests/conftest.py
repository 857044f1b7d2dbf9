"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from app.core.config import settings
from app.core.database import get_session
from app.main import app
from app.models import Conference, ConferenceAttendee, User
from app.services import conferences, meetings

ALICE = "subject|alice"
BOB = "subject|bob"
CAROL = "subject|carol"


def auth(subject: str) -> dict:
    """Headers a request carries once the proxy has verified the caller."""
    return {settings.identity_header: subject}


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a new database session for each test."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with the test database session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def _user(session: Session, subject: str, name: str) -> User:
    user = User(external_subject=subject, name=name, bio=f"{name}'s bio")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="alice")
def alice_fixture(session: Session) -> User:
    return _user(session, ALICE, "Alice")


@pytest.fixture(name="bob")
def bob_fixture(session: Session) -> User:
    return _user(session, BOB, "Bob")


@pytest.fixture(name="carol")
def carol_fixture(session: Session) -> User:
    return _user(session, CAROL, "Carol")


@pytest.fixture(name="conference")
def conference_fixture(session: Session, alice: User) -> Conference:
    """A conference created by Alice, who is therefore attending it."""
    start = datetime.now(UTC) + timedelta(days=3)
    conference_id = conferences.create_conference(
        session,
        ALICE,
        name="Tech Summit",
        description="Emerging technologies",
        start_date=start,
        end_date=start + timedelta(days=2),
    )
    return session.get(Conference, conference_id)


@pytest.fixture(name="bob_attending")
def bob_attending_fixture(session: Session, conference: Conference, bob: User) -> User:
    """Bob as a conference attendee."""
    session.add(ConferenceAttendee(conference_id=conference.id, user_id=bob.id))
    session.commit()
    return bob


@pytest.fixture(name="public_meeting")
def public_meeting_fixture(session: Session, conference: Conference):
    """A public meeting owned by Alice with no invitees."""
    start = datetime.now(UTC) + timedelta(days=3, hours=2)
    return meetings.create_meeting(
        session,
        ALICE,
        conference.id,
        title="Hallway Track",
        start_time=start,
        end_time=start + timedelta(hours=1),
        is_public=True,
    )


@pytest.fixture(name="private_meeting")
def private_meeting_fixture(session: Session, conference: Conference, bob: User):
    """A private meeting owned by Alice with Bob invited."""
    start = datetime.now(UTC) + timedelta(days=3, hours=4)
    return meetings.create_meeting(
        session,
        ALICE,
        conference.id,
        title="Planning",
        description="Invite only",
        start_time=start,
        end_time=start + timedelta(hours=1),
        is_public=False,
        invitee_user_ids=[bob.id],
    )
