from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import DuplicateEntryError
from routes.crud import favorites as favorites_crud
from routes.utils import get_required_access_token_payload
from schemas import (
    AccessTokenPayload,
    MovieRefSchema,
    FavoriteSchema,
    FavoriteStatusSchema,
)

router = APIRouter()


@router.post(
    "/favorites",
    response_model=FavoriteSchema,
    summary="Add movie to favorite",
    description="<h3>Add specific movie to favorite list by id.</h3>",
    responses={
        400: {
            "description": "Movie already in favorite list.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Movie already in favorites"}
                }
            },
        },
    },
    status_code=201
)
async def add_to_favorites(
        data: MovieRefSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> FavoriteSchema:
    try:
        favorite = await favorites_crud.add_to_favorites(
            db, token_payload["user_id"], data.movie_id
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return FavoriteSchema.model_validate(favorite)


@router.delete(
    "/favorites/{movie_id}",
    summary="Remove movie from favorite list",
    description="<h3>Remove specific movie from favorite list by id.</h3>",
    status_code=204
)
async def remove_from_favorites(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await favorites_crud.remove_from_favorites(
        db, token_payload["user_id"], movie_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/favorites",
    response_model=List[FavoriteSchema],
    summary="Own favorites",
)
async def get_own_favorites(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[FavoriteSchema]:
    favorites = await favorites_crud.get_favorites_by_user(
        db, token_payload["user_id"]
    )
    return [FavoriteSchema.model_validate(item) for item in favorites]


@router.get(
    "/user/{user_id}/favorites",
    response_model=List[FavoriteSchema],
    summary="Favorites of any user",
)
async def get_user_favorites(
        user_id: int,
        db: AsyncSession = Depends(get_db),
) -> List[FavoriteSchema]:
    favorites = await favorites_crud.get_favorites_by_user(db, user_id)
    return [FavoriteSchema.model_validate(item) for item in favorites]


@router.get(
    "/favorites/{movie_id}/status",
    response_model=FavoriteStatusSchema,
    summary="Is the movie in my favorites",
)
async def get_favorite_status(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> FavoriteStatusSchema:
    in_favorites = await favorites_crud.is_in_favorites(
        db, token_payload["user_id"], movie_id
    )
    return FavoriteStatusSchema(in_favorites=in_favorites)
