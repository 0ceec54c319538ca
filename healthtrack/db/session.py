import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from healthtrack.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    if settings.uses_sqlite:
        # Local runs and tests: one shared connection so an in-memory database survives
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "echo": settings.DB_ECHO,
        }

    # PostgreSQL configuration with connection pooling
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_pre_ping": True,    # Validate connections before use
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "connect_args": {
            "connect_timeout": settings.DB_POOL_TIMEOUT,
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
        },
        "echo": settings.DB_ECHO,
    }


engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_options())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def dispose_engine() -> None:
    """Release every pooled connection. Called once at process shutdown."""
    engine.dispose()
    logger.info("Database connection pool disposed")
