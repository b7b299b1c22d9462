"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 as the keyed record store behind the
book repository.

The store is addressed by three settings (connection string, database name,
collection name). The first two are combined into the engine URL here; the
collection name becomes the books table name in bookshelf.models.book.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all repository operations in that request
3. Close session when request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookshelf.config import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
def create_db_engine(config: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured record store.

    Pool sizing only applies to server databases; SQLite (used for local
    runs and tests) gets SQLAlchemy's default pool.

    Args:
        config: Application settings

    Returns:
        Configured Engine (no connection is opened yet)
    """
    url = config.sqlalchemy_url

    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=config.debug,
        )

    return create_engine(
        url,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=config.debug,  # Log SQL in debug mode
    )


engine = create_db_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it.
    The finally block ensures cleanup happens even if an exception occurs.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and the seed script. In production, use
    Alembic migrations instead.
    """
    logger.info(f"Creating tables: {', '.join(Base.metadata.tables)}")
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development or tests.
    """
    Base.metadata.drop_all(bind=engine)
