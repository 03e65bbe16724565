from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database import UserModel
from routes.crud.utils import insert_unique, commit_or_raise_duplicate


async def get_user(db: AsyncSession, user_id: int) -> UserModel | None:
    return await db.get(UserModel, user_id)


async def get_user_by_username(
        db: AsyncSession, username: str
) -> UserModel | None:
    stmt = select(UserModel).where(UserModel.username == username)
    result = await db.execute(stmt)
    return result.scalars().first()


async def get_user_by_email(db: AsyncSession, email: str) -> UserModel | None:
    stmt = select(UserModel).where(UserModel.email == email.lower())
    result = await db.execute(stmt)
    return result.scalars().first()


async def create_user(
        db: AsyncSession, username: str, email: str, password: str
) -> UserModel:
    """
    Insert a new user.

    Raises:
        DuplicateEntryError: username or email is already registered.
    """
    user = UserModel.create(
        username=username, email=email, raw_password=password
    )
    return await insert_unique(
        db, user, "User", "A user with this username or email already exists."
    )


async def update_user(
        db: AsyncSession, user_id: int, data: dict[str, Any]
) -> UserModel | None:
    user = await db.get(UserModel, user_id)
    if user is None:
        return None
    for field, value in data.items():
        setattr(user, field, value)
    await commit_or_raise_duplicate(
        db, "User", "A user with this username or email already exists."
    )
    await db.refresh(user)
    return user
