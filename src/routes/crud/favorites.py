from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database import FavoriteModel
from routes.crud.utils import insert_unique


async def add_to_favorites(
        db: AsyncSession, user_id: int, movie_id: int
) -> FavoriteModel:
    """
    Raises:
        DuplicateEntryError: the movie is already in the user's favorites.
    """
    favorite = FavoriteModel(user_id=user_id, movie_id=movie_id)
    return await insert_unique(
        db, favorite, "Favorite", "Movie already in favorites"
    )


async def remove_from_favorites(
        db: AsyncSession, user_id: int, movie_id: int
) -> None:
    stmt = delete(FavoriteModel).where(
        (FavoriteModel.user_id == user_id) &
        (FavoriteModel.movie_id == movie_id)
    )
    await db.execute(stmt)
    await db.commit()


async def get_favorites_by_user(
        db: AsyncSession, user_id: int
) -> list[FavoriteModel]:
    stmt = (
        select(FavoriteModel)
        .where(FavoriteModel.user_id == user_id)
        .order_by(*FavoriteModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def is_in_favorites(
        db: AsyncSession, user_id: int, movie_id: int
) -> bool:
    stmt = select(FavoriteModel.id).where(
        (FavoriteModel.user_id == user_id) &
        (FavoriteModel.movie_id == movie_id)
    )
    result = await db.execute(stmt)
    return result.scalars().first() is not None
