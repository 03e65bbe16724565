from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import DuplicateEntryError
from routes.crud import diary as diary_crud
from routes.crud import watchlist as watchlist_crud
from routes.utils import get_required_access_token_payload
from schemas import (
    AccessTokenPayload,
    MovieRefSchema,
    WatchlistItemSchema,
    WatchlistStatusSchema,
    WatchEventSchema,
    DiaryEntrySchema,
)

router = APIRouter()


@router.post(
    "/watchlist",
    response_model=WatchlistItemSchema,
    summary="Add movie to watchlist",
    description="<h3>Add a movie to the authenticated user's watchlist.</h3>",
    responses={
        400: {
            "description": "Movie already in watchlist.",
            "content": {
                "application/json": {
                    "example": {"detail": "Movie already in watchlist"}
                }
            },
        },
    },
    status_code=201
)
async def add_to_watchlist(
        data: MovieRefSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> WatchlistItemSchema:
    try:
        item = await watchlist_crud.add_to_watchlist(
            db, token_payload["user_id"], data.movie_id
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return WatchlistItemSchema.model_validate(item)


@router.delete(
    "/watchlist/{movie_id}",
    summary="Remove movie from watchlist",
    description=(
        "<h3>Remove a movie from the authenticated user's watchlist.</h3>"
        "<p>Removing a movie that is not in the watchlist is not an error.</p>"
    ),
    status_code=204
)
async def remove_from_watchlist(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await watchlist_crud.remove_from_watchlist(
        db, token_payload["user_id"], movie_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/watchlist",
    response_model=List[WatchlistItemSchema],
    summary="Own watchlist",
)
async def get_own_watchlist(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[WatchlistItemSchema]:
    items = await watchlist_crud.get_watchlist_by_user(
        db, token_payload["user_id"]
    )
    return [WatchlistItemSchema.model_validate(item) for item in items]


@router.get(
    "/user/{user_id}/watchlist",
    response_model=List[WatchlistItemSchema],
    summary="Watchlist of any user",
)
async def get_user_watchlist(
        user_id: int,
        db: AsyncSession = Depends(get_db),
) -> List[WatchlistItemSchema]:
    items = await watchlist_crud.get_watchlist_by_user(db, user_id)
    return [WatchlistItemSchema.model_validate(item) for item in items]


@router.get(
    "/watchlist/{movie_id}/status",
    response_model=WatchlistStatusSchema,
    summary="Is the movie in my watchlist",
)
async def get_watchlist_status(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> WatchlistStatusSchema:
    in_watchlist = await watchlist_crud.is_in_watchlist(
        db, token_payload["user_id"], movie_id
    )
    return WatchlistStatusSchema(in_watchlist=in_watchlist)


@router.post(
    "/watchlist/{movie_id}/watched",
    response_model=DiaryEntrySchema,
    summary="Mark a movie as watched",
    description=(
        "<h3>Remove the movie from the watchlist and log it in the diary.</h3>"
        "<p>Both changes are applied together or not at all.</p>"
    ),
    status_code=201
)
async def mark_watched(
        movie_id: int,
        data: Optional[WatchEventSchema] = None,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> DiaryEntrySchema:
    event = data or WatchEventSchema()
    entry = await diary_crud.mark_watched(
        db,
        user_id=token_payload["user_id"],
        movie_id=movie_id,
        watched_at=event.watched_at,
        rating=event.rating,
        review=event.review,
        liked=event.liked,
    )
    return DiaryEntrySchema.model_validate(entry)
