"""
Tests for user registration and seeding.
"""

import random

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel, select

from ranking_backend.core import build_engine
from ranking_backend.errors import DuplicateError, StorageError, ValidationError
from ranking_backend.models import User
from ranking_backend.services.users import (
    DEFAULT_USERNAMES,
    add_user,
    initialize_users,
    normalize_username,
)


class TestNormalizeUsername:
    """Tests for normalize_username."""

    def test_trims_whitespace(self):
        assert normalize_username("  Neha ") == "Neha"

    @pytest.mark.parametrize("raw", [None, "", "   ", 42])
    def test_rejects_missing(self, raw):
        with pytest.raises(ValidationError):
            normalize_username(raw)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            normalize_username("x" * 41)


class TestAddUser:
    """Tests for add_user."""

    def test_new_user_starts_at_zero(self, session):
        user = add_user(session, " Alice ")
        assert user.id is not None
        assert user.username == "Alice"
        assert user.points == 0

    def test_duplicate_rejected_and_points_kept(self, session, make_user):
        existing = make_user("Alice", 25)

        with pytest.raises(DuplicateError):
            add_user(session, "Alice")

        session.refresh(existing)
        assert existing.points == 25
        assert len(session.exec(select(User)).all()) == 1

    def test_duplicate_after_trim(self, session, make_user):
        make_user("Bob", 3)
        with pytest.raises(DuplicateError):
            add_user(session, "  Bob")

    def test_reload_failure_is_storage_error(self, session, monkeypatch):
        def broken_refresh(instance):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(session, "refresh", broken_refresh)

        with pytest.raises(StorageError):
            add_user(session, "Carol")


class TestInitializeUsers:
    """Tests for initialize_users."""

    def test_seeds_full_roster(self, session):
        result = initialize_users(session, rng=random.Random(7))

        assert not result.partial
        assert [user.username for user in result.inserted] == list(DEFAULT_USERNAMES)
        assert all(0 <= user.points <= 99 for user in result.inserted)

    def test_existing_names_are_skipped(self, session, make_user):
        make_user("Rahul", 500)

        result = initialize_users(session)

        assert result.partial
        assert result.skipped == ["Rahul"]
        assert len(result.inserted) == len(DEFAULT_USERNAMES) - 1
        rahul = session.exec(select(User).where(User.username == "Rahul")).one()
        assert rahul.points == 500

    def test_second_run_inserts_nothing(self, session):
        initialize_users(session)
        result = initialize_users(session)
        assert result.inserted == []
        assert result.skipped == list(DEFAULT_USERNAMES)

    def test_roster_names_are_normalized(self, session):
        result = initialize_users(session, ["  Ana ", "Ana", "Ben"])

        assert [user.username for user in result.inserted] == ["Ana", "Ben"]
        assert result.skipped == ["Ana"]

    def test_invalid_roster_name_rejected(self, session):
        with pytest.raises(ValidationError):
            initialize_users(session, ["Ana", "x" * 41])
        assert session.exec(select(User)).all() == []

    def test_name_inserted_by_another_request_is_skipped(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'seed.db'}")
        SQLModel.metadata.create_all(engine)

        fired = []

        def insert_rahul_elsewhere(session, flush_context, instances):
            if fired:
                return
            fired.append(True)
            with Session(engine) as other:
                other.add(User(username="Rahul", points=1))
                other.commit()

        try:
            with Session(engine) as session:
                event.listen(session, "before_flush", insert_rahul_elsewhere)

                result = initialize_users(session)

                assert result.skipped == ["Rahul"]
                assert [user.username for user in result.inserted] == list(DEFAULT_USERNAMES[1:])
                assert len(session.exec(select(User)).all()) == len(DEFAULT_USERNAMES)
        finally:
            engine.dispose()
