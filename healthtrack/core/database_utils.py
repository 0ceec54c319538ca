"""
Database utility functions for consistent session handling across the application.

``get_db_session`` is for scripts and startup checks that need a session
outside of a request. ``store_operation`` wraps every repository call so a
lost or slow database surfaces as ``StoreUnavailable`` and never as a miss.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from healthtrack.core.errors import StoreUnavailable
from healthtrack.db.session import SessionLocal

logger = logging.getLogger(__name__)

# Errors that mean the store itself is unreachable rather than the request being wrong
UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,
)


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """
    Get a database session with proper cleanup using context manager.

    Usage:
        with get_db_session() as db:
            result = db.query(Model).all()

    Commits on success, rolls back on any exception and always closes.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database session error: {e}")
        raise
    finally:
        db.close()


def is_unavailable_error(error: Exception) -> bool:
    if isinstance(error, UNAVAILABLE_ERRORS):
        return True
    return isinstance(error, sa_exc.DBAPIError) and bool(error.connection_invalidated)


@contextmanager
def store_operation(db: Session, operation: str) -> Generator[None, None, None]:
    """
    Run one repository operation against the store.

    Any SQLAlchemy failure rolls the session back so no partial write is
    left pending. Connection loss, pool exhaustion and timeouts are raised
    as ``StoreUnavailable``; everything else propagates unchanged.
    """
    try:
        yield
    except sa_exc.SQLAlchemyError as e:
        db.rollback()
        if is_unavailable_error(e):
            logger.error(f"[Store] {operation} failed, store unavailable: {e}")
            raise StoreUnavailable(operation=operation) from e
        logger.error(f"[Store] {operation} failed: {e}")
        raise
