from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Generator

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, Session

from config import get_settings

settings = get_settings()

POSTGRESQL_DATABASE_URL = f"postgresql+asyncpg://{settings.POSTGRES_DSN}"
postgresql_engine = create_async_engine(
    POSTGRESQL_DATABASE_URL, echo=False, pool_pre_ping=True
)
AsyncPostgresqlSessionLocal = sessionmaker(  # type: ignore
    bind=postgresql_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_postgresql_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide an asynchronous database session.

    This function returns an async generator yielding a new database session.
    It ensures that the session is properly closed after use.

    :return: An asynchronous generator yielding an AsyncSession instance.
    """
    async with AsyncPostgresqlSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_postgresql_db_contextmanager() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide an asynchronous database session using a context manager.

    :return: An asynchronous generator yielding an AsyncSession instance.
    """
    async with AsyncPostgresqlSessionLocal() as session:
        yield session


# sync, used by celery workers

SYNC_POSTGRESQL_DATABASE_URL = f"postgresql+psycopg2://{settings.POSTGRES_DSN}"

sync_postgresql_engine = create_engine(
    SYNC_POSTGRESQL_DATABASE_URL, echo=False, pool_pre_ping=True
)

SyncPostgresqlSessionLocal = sessionmaker(  # type: ignore
    bind=sync_postgresql_engine,
    class_=Session,
    expire_on_commit=False
)


@contextmanager
def get_sync_postgresql_db_contextmanager() -> Generator[Session, None, None]:
    """
    Provide a synchronous database session using a context manager.

    :return: A synchronous generator yielding a Session instance.
    """
    with SyncPostgresqlSessionLocal() as session:
        yield session
