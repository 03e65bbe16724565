import logging
from datetime import datetime, timedelta, UTC

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from database import MovieCacheModel

logger = logging.getLogger(__name__)


async def get_cached_movie(
        db: AsyncSession,
        tmdb_id: int,
        max_age: timedelta | None = None,
) -> MovieCacheModel | None:
    """
    Return the cached metadata for a movie.

    When max_age is given, entries last refreshed earlier than that are
    treated as absent.
    """
    stmt = select(MovieCacheModel).where(MovieCacheModel.tmdb_id == tmdb_id)
    if max_age is not None:
        stmt = stmt.where(
            MovieCacheModel.last_updated >= datetime.now(UTC) - max_age
        )
    result = await db.execute(stmt)
    return result.scalars().first()


async def cache_movie(
        db: AsyncSession, tmdb_id: int, data: dict
) -> MovieCacheModel:
    """Insert or overwrite the cached metadata for a movie."""
    stmt = select(MovieCacheModel).where(MovieCacheModel.tmdb_id == tmdb_id)
    result = await db.execute(stmt)
    entry = result.scalars().first()

    if entry is None:
        entry = MovieCacheModel(tmdb_id=tmdb_id, data=data)
        db.add(entry)
        try:
            await db.commit()
        except IntegrityError:
            # another request cached the same movie first
            await db.rollback()
            result = await db.execute(stmt)
            entry = result.scalars().one()
            entry.data = data
            entry.last_updated = datetime.now(UTC)
            await db.commit()
    else:
        entry.data = data
        entry.last_updated = datetime.now(UTC)
        await db.commit()

    await db.refresh(entry)
    return entry


def purge_stale_movies(db: Session, max_age: timedelta) -> int:
    """Synchronous purge used by the celery worker; returns deleted rows."""
    stmt = delete(MovieCacheModel).where(
        MovieCacheModel.last_updated < datetime.now(UTC) - max_age
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount
