"""Integration test fixtures: in-memory SQLite shared across sessions."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sleep.domain.orm import Base


@pytest.fixture
def engine():
    """Create engine and initialize schema."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory) -> Session:
    """Provide a session that rolls back after each test."""
    with session_factory() as session:
        yield session
        session.rollback()
