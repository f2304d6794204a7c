"""Database engine and session factory."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from shared.exceptions import StorageError
from sleep.domain.orm import Base

logger = structlog.get_logger()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Open the engine and create the answers table if it does not exist."""
    try:
        engine = create_engine(database_url, echo=False)
        Base.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.error("storage_error", stage="connect", error=str(exc))
        raise StorageError(str(exc)) from exc
    return sessionmaker(engine, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on failure.

    SQLAlchemy errors surface as StorageError.
    """
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("storage_error", stage="session", error=str(exc))
            raise StorageError(str(exc)) from exc
