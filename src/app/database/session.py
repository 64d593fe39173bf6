import logging
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from app.config import get_settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    SQLite ships with foreign keys switched off; turn them on for every new
    DBAPI connection so dangling references are rejected like on other engines.

    The driver's own implicit BEGIN handling is also switched off and BEGIN is
    emitted by SQLAlchemy instead, otherwise SAVEPOINTs (one per repository
    write) do not nest inside the outer transaction.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    engine = create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,   # Enables connection health checks
    )
    enable_sqlite_foreign_keys(engine)
    return engine


# Built lazily so importing the app never requires the production driver.
@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return build_engine(settings.DATABASE_URL, echo=settings.SQLALCHEMY_ECHO)


@lru_cache()
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def dispose_engine() -> None:
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_sessionmaker.cache_clear()
        get_engine.cache_clear()


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. One session (and transaction) per request.

    The transaction is committed when the endpoint returns normally and rolled
    back when it raises, so repositories only flush.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_sessionmaker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
