"""
Database session management utilities.
"""

import logging
from typing import Generator

from sqlalchemy.orm import Session

from taskboss.db.base import SessionLocal, Base, engine

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Get a database session.

    Yields:
        SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create missing tables and bring older databases up to date."""
    # Models must be imported so their tables are registered on Base.metadata
    from taskboss import models  # noqa: F401
    from taskboss.db.migrations import run_migrations

    Base.metadata.create_all(bind=engine)
    run_migrations(engine)
    logger.info("Database initialized")
