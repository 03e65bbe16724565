from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database import FollowModel
from routes.crud.utils import insert_unique


async def follow_user(
        db: AsyncSession, follower_id: int, following_id: int
) -> FollowModel:
    """
    Raises:
        DuplicateEntryError: the follow relationship already exists.
    """
    follow = FollowModel(follower_id=follower_id, following_id=following_id)
    return await insert_unique(
        db, follow, "Follow", "Already following this user"
    )


async def unfollow_user(
        db: AsyncSession, follower_id: int, following_id: int
) -> None:
    stmt = delete(FollowModel).where(
        (FollowModel.follower_id == follower_id) &
        (FollowModel.following_id == following_id)
    )
    await db.execute(stmt)
    await db.commit()


async def get_followers(db: AsyncSession, user_id: int) -> list[FollowModel]:
    stmt = (
        select(FollowModel)
        .where(FollowModel.following_id == user_id)
        .order_by(*FollowModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_following(db: AsyncSession, user_id: int) -> list[FollowModel]:
    stmt = (
        select(FollowModel)
        .where(FollowModel.follower_id == user_id)
        .order_by(*FollowModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def is_following(
        db: AsyncSession, follower_id: int, following_id: int
) -> bool:
    stmt = select(FollowModel.id).where(
        (FollowModel.follower_id == follower_id) &
        (FollowModel.following_id == following_id)
    )
    result = await db.execute(stmt)
    return result.scalars().first() is not None
