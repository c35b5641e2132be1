"""
Database Configuration Module

Sets up SQLAlchemy 2.0 for the Book Catalog API.

We use SYNCHRONOUS SQLAlchemy: the API does a handful of single-row reads
and writes per request, and FastAPI runs sync handlers in a threadpool.

Session Management Pattern
==========================
"Session per request":
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

Implemented with FastAPI's dependency injection (see get_db).
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from catalog_api.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# SQLite (the default store) is used from FastAPI's worker threads, so the
# same-thread check has to be disabled. Pool sizing only applies to
# server databases such as PostgreSQL.

if settings.is_sqlite:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.debug,
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


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

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, the route handler receives it,
    and the finally block closes it even if the handler raised.

    Usage in Routes:
        @router.get("/books")
        def list_books(db: DbSession):
            ...

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
    Create all database tables that do not exist yet.

    Used on startup for the default SQLite store and by the seed script.
    Managed deployments should run `alembic upgrade head` instead.
    """
    # Register every model with Base.metadata before creating
    import catalog_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and testing only.
    """
    Base.metadata.drop_all(bind=engine)
