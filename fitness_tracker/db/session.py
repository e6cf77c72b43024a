from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from fitness_tracker.config.settings import settings
from fitness_tracker.core.errors import ProfileExistsError, RecordNotFoundError, WorkoutValidationError
from fitness_tracker.db.models import Base

# Lazy initialization so importing the package never touches the database
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        logger.info(f"Initializing database engine: {settings.database_url}")
        connect_args = {}
        if "sqlite" in settings.database_url.lower():
            connect_args = {"check_same_thread": False}
        _engine = create_engine(
            settings.database_url,
            connect_args=connect_args,
            echo=False,
            pool_pre_ping=True,
        )
        logger.info("Database engine initialized")
    return _engine


def get_engine() -> Engine:
    """Get or create the database engine (public API)."""
    return _get_engine()


def _get_session_local() -> sessionmaker:
    """Get or create the session factory (lazy initialization)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
        logger.info("Database session factory initialized")
    return _SessionLocal


def get_session_factory() -> sessionmaker:
    """Get the session factory (public API)."""
    return _get_session_local()


def configure_engine(engine: Engine) -> None:
    """Bind the session factory to an existing engine.

    Used by tests and the CLI to point the app at a different database.
    """
    global _engine, _SessionLocal
    _engine = engine
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    logger.debug(f"Session factory rebound to {engine.url}")


def init_db() -> None:
    """Create any missing tables. Existing data is left as is."""
    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=_get_engine())
    logger.info("Database tables verified")


def get_db() -> Generator[Session, None, None]:
    """Get database session for FastAPI dependencies.

    Plain generator that FastAPI uses with Depends(). Repositories commit
    their own writes; the session is closed when the request finishes.

    Yields:
        Session: SQLAlchemy database session
    """
    session = _get_session_local()()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get database session context manager.

    Commits on success. Any exception rolls the session back and is
    re-raised; domain errors are not logged as database failures.

    For FastAPI route dependencies, use get_db() instead.
    """
    session = _get_session_local()()
    try:
        yield session
        session.commit()
    except (ProfileExistsError, RecordNotFoundError, WorkoutValidationError):
        session.rollback()
        raise
    except Exception as e:
        logger.error(f"Database session error: {e}")
        session.rollback()
        raise
    finally:
        session.close()
