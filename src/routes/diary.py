from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db, DiaryEntryModel
from routes.crud import diary as diary_crud
from routes.permissions import get_owned_diary_entry
from routes.utils import get_required_access_token_payload
from schemas import (
    AccessTokenPayload,
    DiaryEntryCreateSchema,
    DiaryEntryUpdateSchema,
    DiaryEntrySchema,
    DiaryStatusSchema,
)

router = APIRouter()

not_owner_response = {
    "description": "The diary entry belongs to another user.",
    "content": {
        "application/json": {
            "example": {"detail": "Not authorized"}
        }
    },
}
not_found_response = {
    "description": "Diary entry not found.",
    "content": {
        "application/json": {
            "example": {"detail": "Diary entry not found"}
        }
    },
}


@router.post(
    "/diary",
    response_model=DiaryEntrySchema,
    summary="Log a watch",
    description=(
        "<h3>Add a diary entry.</h3>"
        "<p>A movie can be logged any number of times (re-watches). "
        "Rating is 1-5 stars and optional.</p>"
    ),
    status_code=201
)
async def add_diary_entry(
        data: DiaryEntryCreateSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> DiaryEntrySchema:
    entry = await diary_crud.add_diary_entry(
        db,
        user_id=token_payload["user_id"],
        movie_id=data.movie_id,
        watched_at=data.watched_at,
        rating=data.rating,
        review=data.review,
        liked=data.liked,
    )
    return DiaryEntrySchema.model_validate(entry)


@router.patch(
    "/diary/{entry_id}",
    response_model=DiaryEntrySchema,
    summary="Edit a diary entry",
    responses={403: not_owner_response, 404: not_found_response},
)
async def update_diary_entry(
        data: DiaryEntryUpdateSchema,
        entry: DiaryEntryModel = Depends(get_owned_diary_entry),
        db: AsyncSession = Depends(get_db),
) -> DiaryEntrySchema:
    updated = await diary_crud.update_diary_entry(
        db, entry.id, data.model_dump(exclude_unset=True)
    )
    return DiaryEntrySchema.model_validate(updated)


@router.delete(
    "/diary/{entry_id}",
    summary="Delete a diary entry",
    responses={403: not_owner_response, 404: not_found_response},
    status_code=204
)
async def remove_diary_entry(
        entry: DiaryEntryModel = Depends(get_owned_diary_entry),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await diary_crud.remove_diary_entry(db, entry.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/diary/movie/{movie_id}",
    summary="Un-mark a movie as watched",
    description=(
        "<h3>Delete every diary entry of the authenticated user for the "
        "movie.</h3>"
    ),
    status_code=204
)
async def unmark_watched(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await diary_crud.remove_diary_entries_for_movie(
        db, token_payload["user_id"], movie_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/diary",
    response_model=List[DiaryEntrySchema],
    summary="Own diary",
)
async def get_own_diary(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[DiaryEntrySchema]:
    entries = await diary_crud.get_diary_entries_by_user(
        db, token_payload["user_id"]
    )
    return [DiaryEntrySchema.model_validate(entry) for entry in entries]


@router.get(
    "/user/{user_id}/diary",
    response_model=List[DiaryEntrySchema],
    summary="Diary of any user",
)
async def get_user_diary(
        user_id: int,
        db: AsyncSession = Depends(get_db),
) -> List[DiaryEntrySchema]:
    entries = await diary_crud.get_diary_entries_by_user(db, user_id)
    return [DiaryEntrySchema.model_validate(entry) for entry in entries]


@router.get(
    "/diary/{movie_id}/status",
    response_model=DiaryStatusSchema,
    summary="Have I watched the movie",
)
async def get_diary_status(
        movie_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> DiaryStatusSchema:
    watched = await diary_crud.has_watched(
        db, token_payload["user_id"], movie_id
    )
    return DiaryStatusSchema(watched=watched)
