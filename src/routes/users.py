from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import DuplicateEntryError
from routes.crud import users as users_crud
from routes.utils import get_required_access_token_payload
from schemas import AccessTokenPayload, UserSchema, UserUpdateRequestSchema

router = APIRouter()


@router.get(
    "/user",
    response_model=UserSchema,
    summary="Current user",
    description="<h3>Return the profile of the authenticated user.</h3>",
    responses={
        401: {
            "description": "Missing or invalid access token.",
            "content": {
                "application/json": {
                    "example": {"detail": "Unauthorized"}
                }
            },
        },
    },
)
async def get_current_user(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> UserSchema:
    user = await users_crud.get_user(db, token_payload["user_id"])
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserSchema.model_validate(user)


@router.patch(
    "/user",
    response_model=UserSchema,
    summary="Update profile",
    description=(
        "<h3>Partially update the authenticated user's profile.</h3>"
        "<p>Only username, email, bio and avatarUrl can be changed.</p>"
    ),
    responses={
        409: {
            "description": "Username or email already taken.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "A user with this username or email already exists."
                    }
                }
            },
        },
    },
)
async def update_current_user(
        user_data: UserUpdateRequestSchema,
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
) -> UserSchema:
    try:
        user = await users_crud.update_user(
            db,
            token_payload["user_id"],
            user_data.model_dump(exclude_unset=True),
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserSchema.model_validate(user)


@router.get(
    "/user/{username}",
    response_model=UserSchema,
    summary="Public profile",
    description="<h3>Look a user up by username.</h3>",
    responses={
        404: {
            "description": "User not found.",
            "content": {
                "application/json": {
                    "example": {"detail": "User not found"}
                }
            },
        },
    },
)
async def get_user_by_username(
        username: str,
        db: AsyncSession = Depends(get_db),
) -> UserSchema:
    user = await users_crud.get_user_by_username(db, username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserSchema.model_validate(user)
