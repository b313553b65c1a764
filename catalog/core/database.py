"""
Database connection management with SQLAlchemy async.
Provides session dependency injection and connection pooling.
"""
import re
from collections.abc import AsyncGenerator
from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog.core.config import settings
from catalog.core.logging import get_logger

logger = get_logger(__name__)

# Flag to track if database is available
_db_available: bool = False


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""
    pass


def async_database_url(url: str) -> str:
    """Map a plain driver URL onto its async driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def create_engine() -> AsyncEngine:
    """Create async database engine with proper configuration."""
    database_url = async_database_url(settings.database_url)

    sanitized = re.sub(r':([^:@/]+)@', ':***@', database_url)
    logger.info("Creating database engine", url=sanitized)

    # SQLite engines don't take pool sizing
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.database_echo)

    return create_async_engine(
        database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Verify connections before use
    )


# Global engine and session factory
engine = create_engine()
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db_session() -> AsyncGenerator[Optional[AsyncSession], None]:
    """
    Dependency that provides a database session with automatic cleanup.

    Yields None if the database could not be reached at startup; routers
    answer 503 in that case.
    """
    if not _db_available:
        yield None
        return

    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# Type alias for dependency injection
DbSession = Annotated[Optional[AsyncSession], Depends(get_db_session)]


async def init_db() -> None:
    """
    Initialize database tables.

    A failed connection is logged and leaves the API running; catalog
    endpoints report 503 until the process is restarted.
    """
    global _db_available
    # Register models on the metadata
    import catalog.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        _db_available = True
        logger.info("Database initialized")
    except Exception as e:
        _db_available = False
        logger.warning(
            "Database connection failed - catalog endpoints unavailable",
            error=str(e),
        )


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
    logger.info("Database connections closed")
