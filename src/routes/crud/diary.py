import logging
from datetime import datetime, UTC
from typing import Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database import DiaryEntryModel, WatchlistModel

logger = logging.getLogger(__name__)


async def add_diary_entry(
        db: AsyncSession,
        user_id: int,
        movie_id: int,
        watched_at: datetime | None = None,
        rating: int | None = None,
        review: str | None = None,
        liked: bool = False,
) -> DiaryEntryModel:
    entry = DiaryEntryModel(
        user_id=user_id,
        movie_id=movie_id,
        watched_at=watched_at or datetime.now(UTC),
        rating=rating,
        review=review,
        liked=liked,
    )
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


async def get_diary_entry(
        db: AsyncSession, entry_id: int
) -> DiaryEntryModel | None:
    return await db.get(DiaryEntryModel, entry_id)


async def update_diary_entry(
        db: AsyncSession, entry_id: int, data: dict[str, Any]
) -> DiaryEntryModel | None:
    entry = await db.get(DiaryEntryModel, entry_id)
    if entry is None:
        return None
    for field, value in data.items():
        setattr(entry, field, value)
    await db.commit()
    await db.refresh(entry)
    return entry


async def remove_diary_entry(db: AsyncSession, entry_id: int) -> None:
    await db.execute(
        delete(DiaryEntryModel).where(DiaryEntryModel.id == entry_id)
    )
    await db.commit()


async def remove_diary_entries_for_movie(
        db: AsyncSession, user_id: int, movie_id: int
) -> int:
    """Delete every watch of the movie by the user; returns the row count."""
    result = await db.execute(
        delete(DiaryEntryModel).where(
            (DiaryEntryModel.user_id == user_id) &
            (DiaryEntryModel.movie_id == movie_id)
        )
    )
    await db.commit()
    return result.rowcount


async def get_diary_entries_by_user(
        db: AsyncSession, user_id: int
) -> list[DiaryEntryModel]:
    stmt = (
        select(DiaryEntryModel)
        .where(DiaryEntryModel.user_id == user_id)
        .order_by(*DiaryEntryModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def has_watched(db: AsyncSession, user_id: int, movie_id: int) -> bool:
    stmt = select(DiaryEntryModel.id).where(
        (DiaryEntryModel.user_id == user_id) &
        (DiaryEntryModel.movie_id == movie_id)
    )
    result = await db.execute(stmt)
    return result.scalars().first() is not None


async def mark_watched(
        db: AsyncSession,
        user_id: int,
        movie_id: int,
        watched_at: datetime | None = None,
        rating: int | None = None,
        review: str | None = None,
        liked: bool = False,
) -> DiaryEntryModel:
    """
    Move a movie from the watchlist into the diary.

    Both steps share one transaction: either the watchlist row is gone and
    the diary entry exists, or nothing changed.
    """
    entry = DiaryEntryModel(
        user_id=user_id,
        movie_id=movie_id,
        watched_at=watched_at or datetime.now(UTC),
        rating=rating,
        review=review,
        liked=liked,
    )
    try:
        await db.execute(
            delete(WatchlistModel).where(
                (WatchlistModel.user_id == user_id) &
                (WatchlistModel.movie_id == movie_id)
            )
        )
        db.add(entry)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception(
            f"Marking movie {movie_id} as watched failed for user {user_id}"
        )
        raise
    await db.refresh(entry)
    return entry
