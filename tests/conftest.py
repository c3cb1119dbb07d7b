"""Shared fixtures: an isolated in-memory database per test."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from ranking_backend import models  # noqa: F401
from ranking_backend.app import create_app
from ranking_backend.core import build_engine
from ranking_backend.models import User


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_user(session):
    def _make_user(username, points=0):
        user = User(username=username, points=points)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def client():
    app = create_app("sqlite://", reset_db=False)
    with TestClient(app) as test_client:
        yield test_client
