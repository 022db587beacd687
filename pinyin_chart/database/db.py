"""
Database connection and session management
"""

import logging
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..app.core.config import DATABASE_PATH, DATABASE_URL
from .models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str):
    """
    Create an engine for the given URL.

    For SQLite, check_same_thread=False lets FastAPI's threadpool share the
    connection; in-memory databases use StaticPool so every session sees
    the same tables.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=False, **kwargs)
    return create_engine(database_url, echo=False)


if DATABASE_URL == f"sqlite:///{DATABASE_PATH}":
    # Ensure data directory exists
    DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)

engine = create_db_engine(DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Initialize database by creating all tables"""
    bind = bind or engine
    logger.info(f"Initializing database at: {bind.url}")
    Base.metadata.create_all(bind=bind)


def get_db() -> Session:
    """
    Get database session (for FastAPI dependency injection)

    Usage in FastAPI:
        @router.get("/choices")
        def list_choices(db: Session = Depends(get_db)):
            return ReviewChoiceService.get_all(db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session():
    """
    Get database session as context manager

    Usage:
        with get_db_session() as db:
            ReviewChoiceService.set_action(db, 'zh-i-3', 'old')
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# For testing: create in-memory database
def get_test_db():
    """Get an in-memory SQLite database session for testing"""
    test_engine = create_db_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=test_engine)
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    return TestSessionLocal()


if __name__ == "__main__":
    # Initialize database if run directly
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    init_db()
