"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from blogpub.crud.models import ConvertedPost


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="post")
def post_fixture(session):
    """A minimal ConvertedPost persisted to the session."""
    p = ConvertedPost(
        source_path="journals/2026_01_17.md",
        bundle="2026-01-17_Spring",
        title="Spring",
        date="2026-01-17",
        hash="a" * 64,
        output_path="out/2026-01-17_Spring/index.de.md",
    )
    session.add(p)
    session.flush()
    return p
