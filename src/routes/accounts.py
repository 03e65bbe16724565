import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from config import get_jwt_auth_manager, get_settings, BaseAppSettings
from database import get_db
from exceptions import (
    DuplicateEntryError, InvalidTokenError, TokenExpiredError
)
from routes.crud import users as users_crud
from routes.crud import tokens as tokens_crud
from schemas import (
    UserRegistrationRequestSchema,
    UserLoginRequestSchema,
    UserLoginResponseSchema,
    TokenRefreshRequestSchema,
    TokenRefreshResponseSchema,
    MessageResponseSchema,
    UserSchema,
)
from security.interfaces import JWTAuthManagerInterface

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=UserSchema,
    summary="User Registration",
    description="Register a new user with a username, email and password.",
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Conflict - Username or email already taken.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "A user with this username or email already exists."
                    }
                }
            },
        },
        400: {
            "description": "Validation error in the request body.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "password: Value error, Password must contain at least 8 characters."
                    }
                }
            },
        },
    },
)
async def register_user(
        user_data: UserRegistrationRequestSchema,
        db: AsyncSession = Depends(get_db),
) -> UserSchema:
    try:
        user = await users_crud.create_user(
            db,
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
        )
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    logger.info(f"Registered user {user.id} ({user.username})")
    return UserSchema.model_validate(user)


@router.post(
    "/login",
    response_model=UserLoginResponseSchema,
    summary="User Login",
    description="Authenticate a user and return access and refresh tokens.",
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {
            "description": "Unauthorized - Invalid username or password.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid username or password."
                    }
                }
            },
        },
    },
)
async def login_user(
        login_data: UserLoginRequestSchema,
        db: AsyncSession = Depends(get_db),
        settings: BaseAppSettings = Depends(get_settings),
        jwt_manager: JWTAuthManagerInterface = Depends(get_jwt_auth_manager),
) -> UserLoginResponseSchema:
    user = await users_crud.get_user_by_username(db, login_data.username)
    if not user or not user.verify_password(login_data.password):
        logger.info(f"Failed login attempt for '{login_data.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )

    jwt_refresh_token = jwt_manager.create_refresh_token({"user_id": user.id})
    await tokens_crud.save_refresh_token(
        db,
        user_id=user.id,
        token=jwt_refresh_token,
        days_valid=settings.LOGIN_TIME_DAYS,
    )
    jwt_access_token = jwt_manager.create_access_token({"user_id": user.id})
    logger.info(f"User {user.id} logged in")
    return UserLoginResponseSchema(
        access_token=jwt_access_token,
        refresh_token=jwt_refresh_token,
    )


@router.post(
    "/token/refresh",
    response_model=TokenRefreshResponseSchema,
    summary="Refresh Access Token",
    description="Refresh the access token using a valid refresh token.",
    status_code=status.HTTP_200_OK,
    responses={
        401: {
            "description": "Unauthorized - Invalid or expired refresh token.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Refresh token not found."
                    }
                }
            },
        },
    },
)
async def refresh_access_token(
        token_data: TokenRefreshRequestSchema,
        db: AsyncSession = Depends(get_db),
        jwt_manager: JWTAuthManagerInterface = Depends(get_jwt_auth_manager),
) -> TokenRefreshResponseSchema:
    try:
        decoded_token = jwt_manager.decode_refresh_token(
            token_data.refresh_token
        )
    except TokenExpiredError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired."
        )
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    refresh_token_record = await tokens_crud.get_refresh_token(
        db, token_data.refresh_token
    )
    if not refresh_token_record:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token not found.",
        )

    user = await users_crud.get_user(db, decoded_token.get("user_id"))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found.",
        )

    new_access_token = jwt_manager.create_access_token({"user_id": user.id})
    return TokenRefreshResponseSchema(access_token=new_access_token)


@router.post(
    "/logout",
    response_model=MessageResponseSchema,
    summary="User Logout",
    description="Revoke the given refresh token. Repeating the call is harmless.",
    status_code=status.HTTP_200_OK,
)
async def logout_user(
        token_data: TokenRefreshRequestSchema,
        db: AsyncSession = Depends(get_db),
) -> MessageResponseSchema:
    await tokens_crud.delete_refresh_token(db, token_data.refresh_token)
    return MessageResponseSchema(message="Logout successful.")
