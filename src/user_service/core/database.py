"""
Database Configuration

Async SQLAlchemy engine and session factory construction.

The session factory is the shared storage handle of the persistence layer:
it is built here and passed explicitly to the repository registry. Nothing
in the repositories reaches for a module-level engine.
"""

import logging

from sqlalchemy import MetaData, event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from user_service.core.config import settings

logger = logging.getLogger(__name__)


NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all ORM row classes."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Engine and session factory owned by the application lifespan
_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    url: str,
    *,
    echo: bool = False,
    pool_size: int | None = None,
    max_overflow: int | None = None,
) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    SQLite URLs get foreign key enforcement and a generous busy timeout;
    pool sizing only applies to server databases.
    """
    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=echo, connect_args={"timeout": 30})
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    kwargs = {"pool_pre_ping": True}
    if pool_size is not None:
        kwargs["pool_size"] = pool_size
    if max_overflow is not None:
        kwargs["max_overflow"] = max_overflow
    return create_async_engine(url, echo=echo, **kwargs)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory shared by every repository."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(url: str | None = None) -> async_sessionmaker[AsyncSession]:
    """
    Initialize the application engine and verify connectivity.

    Call this on application startup.
    """
    global _engine, _session_maker
    _engine = build_engine(
        url or settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    _session_maker = build_session_maker(_engine)

    # Test connection
    async with _engine.connect() as conn:
        await conn.execute(text("SELECT 1"))

    logger.info(f"Database engine initialized for dialect {_engine.dialect.name}")
    return _session_maker


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the application session factory initialized by ``init_db``."""
    if _session_maker is None:
        raise RuntimeError("Database is not initialized. Call init_db() first.")
    return _session_maker


async def check_db() -> bool:
    """Return True when the application database answers a trivial query."""
    if _engine is None:
        return False
    try:
        async with _engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Database readiness check failed: {e}")
        return False
    return True


async def close_db() -> None:
    """Dispose the application engine."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_maker = None
