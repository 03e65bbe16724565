from fastapi import Depends, status, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db, ListModel, DiaryEntryModel
from routes.crud import diary as diary_crud
from routes.crud import lists as lists_crud
from routes.utils import (
    get_required_access_token_payload,
    get_optional_access_token_payload,
)
from schemas import AccessTokenPayload


def is_owner(
        owner_id: int,
        payload: AccessTokenPayload | None,
) -> bool:
    return payload is not None and payload["user_id"] == owner_id


async def get_owned_list(
        list_id: int,
        payload: AccessTokenPayload = Depends(get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> ListModel:
    """
    Only the owner of a list can change it or its items.
    """
    movie_list = await lists_crud.get_list(db, list_id)
    if movie_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="List not found"
        )
    if not is_owner(movie_list.user_id, payload):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized"
        )
    return movie_list


async def get_readable_list(
        list_id: int,
        payload: AccessTokenPayload | None = Depends(
            get_optional_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> ListModel:
    """
    Public lists are readable by anyone, private ones only by their owner.
    """
    movie_list = await lists_crud.get_list(db, list_id)
    if movie_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="List not found"
        )
    if not movie_list.is_public and not is_owner(movie_list.user_id, payload):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This list is private"
        )
    return movie_list


async def get_owned_diary_entry(
        entry_id: int,
        payload: AccessTokenPayload = Depends(get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> DiaryEntryModel:
    entry = await diary_crud.get_diary_entry(db, entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Diary entry not found"
        )
    if not is_owner(entry.user_id, payload):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized"
        )
    return entry
