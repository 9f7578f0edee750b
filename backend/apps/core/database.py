"""Database configuration."""
import logging
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from apps.core.config import settings

logger = logging.getLogger(__name__)

# SQLite (aiosqlite) for dev, any async URL (e.g. postgresql+asyncpg) via DATABASE_URL
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
)

if engine.dialect.name == "sqlite":
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs (begin_nested) behave;
    # the sqlite driver otherwise defers BEGIN until the first DML statement
    @event.listens_for(engine.sync_engine, "connect")
    def _sqlite_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _sqlite_begin(conn):
        conn.exec_driver_sql("BEGIN")


AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for all ORM tables."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables registered on Base."""
    # Import table modules so they register on Base.metadata
    from apps.emotion import tables as _emotion_tables  # noqa: F401
    from apps.stats import tables as _stats_tables  # noqa: F401
    from apps.stats.storage import StatsStorage
    from apps.users import tables as _users_tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await StatsStorage(session).ensure_row()
        await session.commit()
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))


async def dispose_db() -> None:
    await engine.dispose()
