"""Tests for identity resolution and profiles."""

import pytest
from sqlmodel import Session, select

from app.core import errors
from app.core.config import settings
from app.models import User
from app.services import identity


class TestResolveUser:
    """Tests for mapping verified subjects to users."""

    def test_creates_user_on_first_sight(self, session: Session):
        user = identity.resolve_user(session, "subject|fresh")

        assert user.external_subject == "subject|fresh"
        assert user.name is None
        assert session.exec(select(User)).all() == [user]

    def test_returns_existing_user(self, session: Session, alice: User):
        user = identity.resolve_user(session, alice.external_subject)

        assert user.id == alice.id
        assert len(session.exec(select(User)).all()) == 1

    @pytest.mark.parametrize("subject", [None, ""])
    def test_missing_subject_is_unauthenticated(self, session: Session, subject):
        with pytest.raises(errors.Unauthenticated):
            identity.resolve_user(session, subject)

        assert session.exec(select(User)).all() == []

    def test_lookup_never_creates(self, session: Session):
        assert identity.lookup_user(session, "subject|unknown") is None
        assert identity.lookup_user(session, None) is None
        assert session.exec(select(User)).all() == []


class TestUpdateProfile:
    """Tests for completing a profile."""

    def test_sets_name_and_bio(self, session: Session):
        user = identity.update_profile(
            session, "subject|new", name="  Dana ", bio="Speaker"
        )

        assert user.name == "Dana"
        assert user.bio == "Speaker"

    def test_omitted_fields_are_kept(self, session: Session, alice: User):
        user = identity.update_profile(session, alice.external_subject, bio="Updated")

        assert user.name == "Alice"
        assert user.bio == "Updated"

    def test_blank_name_rejected(self, session: Session, alice: User):
        with pytest.raises(errors.InvalidProfile):
            identity.update_profile(session, alice.external_subject, name="   ")

        session.refresh(alice)
        assert alice.name == "Alice"


class TestDeleteTestUser:
    """Tests for the test-support deletion."""

    def test_refused_outside_test_mode(self, session: Session, alice: User):
        with pytest.raises(errors.TestingDisabled):
            identity.delete_test_user(session, "Alice")

        assert session.get(User, alice.id) is not None

    def test_deletes_by_name(self, session: Session, alice: User, monkeypatch):
        monkeypatch.setattr(settings, "is_test", True)
        alice_id = alice.id

        assert identity.delete_test_user(session, "Alice") is True
        assert session.get(User, alice_id) is None

    def test_unknown_name(self, session: Session, monkeypatch):
        monkeypatch.setattr(settings, "is_test", True)

        assert identity.delete_test_user(session, "Nobody") is False
