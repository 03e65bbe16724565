from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Generator

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from config import get_settings
from database import Base

settings = get_settings()

IN_MEMORY = settings.PATH_TO_DB == ":memory:"


def _engine_options() -> dict:
    # a memory database lives as long as its connection, so every session
    # has to share the single one
    if IN_MEMORY:
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {}


sqlite_engine = create_async_engine(
    f"sqlite+aiosqlite:///{settings.PATH_TO_DB}", echo=False, **_engine_options()
)

# the celery worker runs synchronously; on a file database it sees the same
# data as the API, a memory database is private to the worker process
sync_sqlite_engine = create_engine(
    f"sqlite:///{settings.PATH_TO_DB}", echo=False, **_engine_options()
)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Cascading deletes of list items and user data rely on FK enforcement."""
    if "sqlite" in dbapi_connection.__class__.__module__:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


AsyncSQLiteSessionLocal = sessionmaker(  # type: ignore
    bind=sqlite_engine,
    class_=AsyncSession,
    expire_on_commit=False
)

SyncSQLiteSessionLocal = sessionmaker(  # type: ignore
    bind=sync_sqlite_engine,
    class_=Session,
    expire_on_commit=False
)


async def get_sqlite_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    :return: An asynchronous generator yielding an AsyncSession instance.
    """
    async with AsyncSQLiteSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_sqlite_db_contextmanager() -> AsyncGenerator[AsyncSession, None]:
    """Session for code running outside a request, such as test fixtures."""
    async with AsyncSQLiteSessionLocal() as session:
        yield session


@contextmanager
def get_sync_sqlite_db_contextmanager() -> Generator[Session, None, None]:
    with SyncSQLiteSessionLocal() as session:
        yield session


def _recreate_schema(connection) -> None:
    Base.metadata.drop_all(bind=connection)
    Base.metadata.create_all(bind=connection)


async def reset_sqlite_database() -> None:
    """
    Drop and recreate every table of the async engine.

    Warning: all stored data is lost.
    """
    async with sqlite_engine.begin() as conn:
        await conn.run_sync(_recreate_schema)


def reset_sync_sqlite_database() -> None:
    """Synchronous counterpart of reset_sqlite_database."""
    with sync_sqlite_engine.begin() as conn:
        _recreate_schema(conn)
