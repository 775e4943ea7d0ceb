"""Database connection and session management."""

from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from brokerage.config.settings import get_settings

Base = declarative_base()

# Module-level database state (can be reconfigured at runtime)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None

# Largest busy timeout the driver accepts (milliseconds must fit a C int)
SQLITE_UNBOUNDED_TIMEOUT_S = 2_000_000.0


def _connect_args(database_url: str, lock_timeout_ms: Optional[int]) -> dict:
    """
    Driver arguments per backend.

    SQLite has no advisory locks; writers wait on the database lock for the
    driver's busy timeout. It follows lock_timeout_ms when set and is
    effectively unbounded otherwise.
    """
    if not database_url.startswith("sqlite"):
        return {}
    timeout = (
        lock_timeout_ms / 1000 if lock_timeout_ms is not None else SQLITE_UNBOUNDED_TIMEOUT_S
    )
    return {"check_same_thread": False, "timeout": timeout}


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        database_url = settings.get_database_url()
        _engine = create_engine(
            database_url,
            connect_args=_connect_args(database_url, settings.lock_timeout_ms),
            pool_pre_ping=not database_url.startswith("sqlite"),
            echo=False,
        )
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize database tables."""
    from brokerage.repositories.sqlalchemy import orm_models  # noqa: F401

    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def reset_database() -> None:
    """Reset database state (for reconfiguration)."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _SessionLocal = None
