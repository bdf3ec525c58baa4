"""
Database Core

SQLAlchemy engine, session management, and database utilities for localized-settings.

Features:
- Engine configured from settings (pooled for server databases, SQLite aware)
- Session context manager with automatic rollback on errors
- FastAPI-compatible dependency injection
- Connection health check used by the health endpoint and init script
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import (
    DatabaseError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from localized_settings.core.config import settings
from localized_settings.core.error_codes import DatabaseErrorCode
from localized_settings.core.exceptions import DatabaseException
from localized_settings.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PoolStatus:
    """Immutable connection pool status information."""

    size: int
    checked_out: int
    overflow: int


# Global SQLAlchemy base
Base = declarative_base()


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Build create_engine() keyword arguments for the configured backend."""
    options: Dict[str, Any] = {
        "echo": settings.database__echo,
        "pool_pre_ping": settings.database__pool_pre_ping,
    }
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across the API worker threads
        options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        pool_size=settings.database__pool_size,
        max_overflow=settings.database__max_overflow,
        pool_timeout=settings.database__pool_timeout,
        pool_recycle=settings.database__pool_recycle,
    )
    return options


def _create_database_engine() -> Engine:
    """Create and configure the database engine."""
    database_url = str(settings.database__url)
    try:
        return create_engine(database_url, **_engine_options(database_url))

    except Exception as e:
        logger.error("Failed to create database engine: %s", str(e))

        if "@" in database_url:
            host = database_url.rsplit("@", maxsplit=1)[-1].split("/")[0]
        else:
            host = "unknown"

        raise DatabaseException(
            f"Database engine creation failed: {str(e)}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"database_url_host": host},
        ) from e


# Global engine and session factory
engine = _create_database_engine()

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    future=True,
    expire_on_commit=True,
)


def get_pool_status() -> PoolStatus:
    """Get current connection pool status (zeros for pools without counters)."""
    pool = engine.pool
    return PoolStatus(
        size=getattr(pool, "size", lambda: 0)(),
        checked_out=getattr(pool, "checkedout", lambda: 0)(),
        overflow=getattr(pool, "overflow", lambda: 0)(),
    )


def _create_db_session() -> Generator[Session, None, None]:
    """
    Internal session creation logic shared by the FastAPI dependency and the
    context manager.

    SQLAlchemy errors are rolled back and re-raised as DatabaseException;
    any other exception raised by the caller is rolled back and propagates
    unchanged.
    """
    db_session = SessionLocal()
    logger.debug("Database session created")
    try:
        yield db_session

    except SQLAlchemyError as e:
        logger.error("Database session error: %s", str(e))
        db_session.rollback()
        raise DatabaseException(
            f"Database session error: {str(e)}", DatabaseErrorCode.QUERY_FAILED
        ) from e

    except Exception:
        db_session.rollback()
        raise

    finally:
        db_session.close()
        logger.debug("Database session closed")


def get_db_dependency() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database session.

    Example:
        @router.get("/settings")
        async def list_settings(db: Session = Depends(get_db_dependency)):
            return db.query(Setting.key).all()
    """
    yield from _create_db_session()


@contextmanager
def database_session() -> Generator[Session, None, None]:
    """
    Context manager for database session.

    Use this outside FastAPI dependency injection: stores, CLI commands,
    scripts.

    Example:
        with database_session() as db:
            record = db.query(Setting).filter(Setting.key == "website").first()
    """
    yield from _create_db_session()


def create_tables() -> None:
    """Create all tables registered on Base (idempotent)."""
    # Importing the models package registers every table on Base.metadata
    import localized_settings.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured: %s", ", ".join(Base.metadata.tables))


def dispose_engine() -> None:
    """Dispose database engine and close all connections."""
    try:
        engine.dispose()
        logger.info("Database engine disposed successfully")
    except SQLAlchemyError as e:
        logger.error("Failed to dispose database engine: %s", str(e))


def test_connection() -> Dict[str, Any]:
    """
    Test database connection and return status information.

    Raises:
        DatabaseException: If connection test fails
    """
    try:
        with engine.connect() as conn:
            test_value = conn.execute(text("SELECT 1 as test_value")).scalar()

        pool_status = get_pool_status()
        logger.info(
            "Database connection test - Pool status: Size=%d, Checked out=%d, "
            "Overflow=%d",
            pool_status.size,
            pool_status.checked_out,
            pool_status.overflow,
        )

        status = {
            "connection_test": "passed",
            "test_query_result": test_value,
            "pool_status": {
                "size": pool_status.size,
                "checked_out": pool_status.checked_out,
                "overflow": pool_status.overflow,
            },
            "engine_url": engine.url.render_as_string(hide_password=True),
        }

        logger.info("Database connection test successful")
        return status

    except (OperationalError, DatabaseError, InterfaceError) as e:
        logger.error("Database connection test failed: %s", str(e))
        raise DatabaseException(
            f"Database connection test failed: {str(e)}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"error_type": type(e).__name__},
        ) from e
