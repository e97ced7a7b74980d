"""
Async database session management.

The engine and session factory are created once at application startup by
``init_database`` and shared by every request.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_database(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Initialize the global engine and session factory.

    Args:
        database_url: SQLAlchemy async database URL.
        echo: Whether to log emitted SQL.

    Returns:
        The created engine.
    """
    global _engine, _session_factory

    _engine = create_async_engine(database_url, echo=echo, pool_pre_ping=True)
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


async def close_database() -> None:
    """Dispose the global engine if it was initialized."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def _get_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Database not initialized")
    return _session_factory


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a database session.

    Yields:
        Database session closed after the request.
    """
    async with _get_factory()() as session:
        yield session

