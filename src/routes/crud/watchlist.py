from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database import WatchlistModel
from routes.crud.utils import insert_unique


async def add_to_watchlist(
        db: AsyncSession, user_id: int, movie_id: int
) -> WatchlistModel:
    """
    Raises:
        DuplicateEntryError: the movie is already in the user's watchlist.
    """
    item = WatchlistModel(user_id=user_id, movie_id=movie_id)
    return await insert_unique(
        db, item, "Watchlist item", "Movie already in watchlist"
    )


async def remove_from_watchlist(
        db: AsyncSession, user_id: int, movie_id: int
) -> None:
    stmt = delete(WatchlistModel).where(
        (WatchlistModel.user_id == user_id) &
        (WatchlistModel.movie_id == movie_id)
    )
    await db.execute(stmt)
    await db.commit()


async def get_watchlist_by_user(
        db: AsyncSession, user_id: int
) -> list[WatchlistModel]:
    stmt = (
        select(WatchlistModel)
        .where(WatchlistModel.user_id == user_id)
        .order_by(*WatchlistModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def is_in_watchlist(
        db: AsyncSession, user_id: int, movie_id: int
) -> bool:
    stmt = select(WatchlistModel.id).where(
        (WatchlistModel.user_id == user_id) &
        (WatchlistModel.movie_id == movie_id)
    )
    result = await db.execute(stmt)
    return result.scalars().first() is not None
