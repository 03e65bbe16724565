from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db, ListModel
from exceptions import DuplicateEntryError
from routes.crud import lists as lists_crud
from routes.permissions import get_owned_list, get_readable_list, is_owner
from routes.utils import (
    get_required_access_token_payload,
    get_optional_access_token_payload,
)
from schemas import (
    AccessTokenPayload,
    ListCreateSchema,
    ListUpdateSchema,
    ListSchema,
    ListItemCreateSchema,
    ListItemSchema,
)

router = APIRouter()

owner_only_responses = {
    403: {
        "description": "Only the owner can change a list.",
        "content": {
            "application/json": {
                "example": {"detail": "Not authorized"}
            }
        },
    },
    404: {
        "description": "List not found.",
        "content": {
            "application/json": {
                "example": {"detail": "List not found"}
            }
        },
    },
}

private_list_responses = {
    403: {
        "description": "The list is private and the caller is not its owner.",
        "content": {
            "application/json": {
                "example": {"detail": "This list is private"}
            }
        },
    },
    404: owner_only_responses[404],
}


@router.post(
    "/lists",
    response_model=ListSchema,
    summary="Create a list",
    status_code=201
)
async def create_list(
        data: ListCreateSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> ListSchema:
    movie_list = await lists_crud.create_list(
        db,
        user_id=token_payload["user_id"],
        name=data.name,
        description=data.description,
        is_public=data.is_public,
    )
    return ListSchema.model_validate(movie_list)


@router.get(
    "/lists",
    response_model=List[ListSchema],
    summary="Own lists, private ones included",
)
async def get_own_lists(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[ListSchema]:
    lists = await lists_crud.get_lists_by_user(db, token_payload["user_id"])
    return [ListSchema.model_validate(movie_list) for movie_list in lists]


@router.get(
    "/user/{user_id}/lists",
    response_model=List[ListSchema],
    summary="Lists of any user",
    description=(
        "<h3>Public lists of the user.</h3>"
        "<p>The owner also sees their private lists.</p>"
    ),
)
async def get_user_lists(
        user_id: int,
        token_payload: AccessTokenPayload | None = Depends(
            get_optional_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[ListSchema]:
    lists = await lists_crud.get_lists_by_user(
        db, user_id, only_public=not is_owner(user_id, token_payload)
    )
    return [ListSchema.model_validate(movie_list) for movie_list in lists]


@router.get(
    "/lists/{list_id}",
    response_model=ListSchema,
    summary="Retrieve a list",
    responses=private_list_responses,
)
async def get_list(
        movie_list: ListModel = Depends(get_readable_list),
) -> ListSchema:
    return ListSchema.model_validate(movie_list)


@router.patch(
    "/lists/{list_id}",
    response_model=ListSchema,
    summary="Update a list",
    responses=owner_only_responses,
)
async def update_list(
        data: ListUpdateSchema,
        movie_list: ListModel = Depends(get_owned_list),
        db: AsyncSession = Depends(get_db),
) -> ListSchema:
    updated = await lists_crud.update_list(
        db, movie_list.id, data.model_dump(exclude_unset=True)
    )
    return ListSchema.model_validate(updated)


@router.delete(
    "/lists/{list_id}",
    summary="Delete a list and all its items",
    responses=owner_only_responses,
    status_code=204
)
async def delete_list(
        movie_list: ListModel = Depends(get_owned_list),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await lists_crud.delete_list(db, movie_list.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/lists/{list_id}/items",
    response_model=ListItemSchema,
    summary="Add a movie to a list",
    responses={
        **owner_only_responses,
        400: {
            "description": "Movie already in list.",
            "content": {
                "application/json": {
                    "example": {"detail": "Movie already in list"}
                }
            },
        },
    },
    status_code=201
)
async def add_list_item(
        data: ListItemCreateSchema,
        movie_list: ListModel = Depends(get_owned_list),
        db: AsyncSession = Depends(get_db),
) -> ListItemSchema:
    try:
        item = await lists_crud.add_list_item(
            db, movie_list.id, data.movie_id, data.notes
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return ListItemSchema.model_validate(item)


@router.delete(
    "/lists/{list_id}/items/{movie_id}",
    summary="Remove a movie from a list",
    responses=owner_only_responses,
    status_code=204
)
async def remove_list_item(
        movie_id: int,
        movie_list: ListModel = Depends(get_owned_list),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await lists_crud.remove_list_item(db, movie_list.id, movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/lists/{list_id}/items",
    response_model=List[ListItemSchema],
    summary="Movies in a list",
    responses=private_list_responses,
)
async def get_list_items(
        movie_list: ListModel = Depends(get_readable_list),
        db: AsyncSession = Depends(get_db),
) -> List[ListItemSchema]:
    items = await lists_crud.get_list_items(db, movie_list.id)
    return [ListItemSchema.model_validate(item) for item in items]
