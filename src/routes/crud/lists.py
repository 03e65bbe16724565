import logging
from typing import Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database import ListModel, ListItemModel
from routes.crud.utils import insert_unique

logger = logging.getLogger(__name__)


async def create_list(
        db: AsyncSession,
        user_id: int,
        name: str,
        description: str | None = None,
        is_public: bool = True,
) -> ListModel:
    movie_list = ListModel(
        user_id=user_id,
        name=name,
        description=description,
        is_public=is_public,
    )
    db.add(movie_list)
    await db.commit()
    await db.refresh(movie_list)
    return movie_list


async def get_list(db: AsyncSession, list_id: int) -> ListModel | None:
    return await db.get(ListModel, list_id)


async def update_list(
        db: AsyncSession, list_id: int, data: dict[str, Any]
) -> ListModel | None:
    movie_list = await db.get(ListModel, list_id)
    if movie_list is None:
        return None
    for field, value in data.items():
        setattr(movie_list, field, value)
    await db.commit()
    await db.refresh(movie_list)
    return movie_list


async def delete_list(db: AsyncSession, list_id: int) -> None:
    """
    Delete the list together with all of its items in a single transaction.
    """
    items_result = await db.execute(
        delete(ListItemModel).where(ListItemModel.list_id == list_id)
    )
    await db.execute(delete(ListModel).where(ListModel.id == list_id))
    await db.commit()
    logger.info(
        f"List {list_id} deleted with {items_result.rowcount} item(s)"
    )


async def get_lists_by_user(
        db: AsyncSession, user_id: int, only_public: bool = False
) -> list[ListModel]:
    stmt = select(ListModel).where(ListModel.user_id == user_id)
    if only_public:
        stmt = stmt.where(ListModel.is_public.is_(True))
    stmt = stmt.order_by(*ListModel.default_order_by())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_list_item(
        db: AsyncSession,
        list_id: int,
        movie_id: int,
        notes: str | None = None,
) -> ListItemModel:
    """
    Raises:
        DuplicateEntryError: the movie is already in this list.
    """
    item = ListItemModel(list_id=list_id, movie_id=movie_id, notes=notes)
    return await insert_unique(
        db, item, "List item", "Movie already in list"
    )


async def remove_list_item(
        db: AsyncSession, list_id: int, movie_id: int
) -> None:
    stmt = delete(ListItemModel).where(
        (ListItemModel.list_id == list_id) &
        (ListItemModel.movie_id == movie_id)
    )
    await db.execute(stmt)
    await db.commit()


async def get_list_items(
        db: AsyncSession, list_id: int
) -> list[ListItemModel]:
    stmt = (
        select(ListItemModel)
        .where(ListItemModel.list_id == list_id)
        .order_by(*ListItemModel.default_order_by())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())
