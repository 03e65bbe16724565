import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import DuplicateEntryError
from routes.crud import follows as follows_crud
from routes.crud import users as users_crud
from routes.utils import get_required_access_token_payload
from schemas import (
    AccessTokenPayload,
    FollowCreateSchema,
    FollowSchema,
    FollowStatusSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/follow",
    response_model=FollowSchema,
    summary="Follow a user",
    responses={
        400: {
            "description": "Self-follow or already following.",
            "content": {
                "application/json": {
                    "example": {
                        "self_follow": {"detail": "Cannot follow yourself"},
                        "duplicate": {"detail": "Already following this user"},
                    }
                }
            },
        },
        404: {
            "description": "The user to follow does not exist.",
            "content": {
                "application/json": {
                    "example": {"detail": "User not found"}
                }
            },
        },
    },
    status_code=201
)
async def follow_user(
        data: FollowCreateSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> FollowSchema:
    follower_id = token_payload["user_id"]
    if data.following_id == follower_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot follow yourself"
        )
    if await users_crud.get_user(db, data.following_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    try:
        follow = await follows_crud.follow_user(
            db, follower_id, data.following_id
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    logger.info(f"User {follower_id} now follows {data.following_id}")
    return FollowSchema.model_validate(follow)


@router.delete(
    "/follow/{user_id}",
    summary="Unfollow a user",
    status_code=204
)
async def unfollow_user(
        user_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> Response:
    await follows_crud.unfollow_user(db, token_payload["user_id"], user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/follow/{user_id}/status",
    response_model=FollowStatusSchema,
    summary="Do I follow the user",
)
async def get_follow_status(
        user_id: int,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> FollowStatusSchema:
    following = await follows_crud.is_following(
        db, token_payload["user_id"], user_id
    )
    return FollowStatusSchema(is_following=following)


@router.get(
    "/followers",
    response_model=List[FollowSchema],
    summary="Own followers",
)
async def get_own_followers(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[FollowSchema]:
    follows = await follows_crud.get_followers(db, token_payload["user_id"])
    return [FollowSchema.model_validate(follow) for follow in follows]


@router.get(
    "/following",
    response_model=List[FollowSchema],
    summary="Users I follow",
)
async def get_own_following(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> List[FollowSchema]:
    follows = await follows_crud.get_following(db, token_payload["user_id"])
    return [FollowSchema.model_validate(follow) for follow in follows]


@router.get(
    "/user/{user_id}/followers",
    response_model=List[FollowSchema],
    summary="Followers of any user",
)
async def get_user_followers(
        user_id: int,
        db: AsyncSession = Depends(get_db),
) -> List[FollowSchema]:
    follows = await follows_crud.get_followers(db, user_id)
    return [FollowSchema.model_validate(follow) for follow in follows]


@router.get(
    "/user/{user_id}/following",
    response_model=List[FollowSchema],
    summary="Users followed by any user",
)
async def get_user_following(
        user_id: int,
        db: AsyncSession = Depends(get_db),
) -> List[FollowSchema]:
    follows = await follows_crud.get_following(db, user_id)
    return [FollowSchema.model_validate(follow) for follow in follows]
