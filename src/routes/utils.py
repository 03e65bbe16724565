from fastapi import Depends, status, HTTPException

from config import get_jwt_auth_manager
from exceptions import InvalidTokenError, TokenExpiredError
from schemas import AccessTokenPayload
from security.http import get_token, get_token_or_none
from security.interfaces import JWTAuthManagerInterface


def get_access_token_payload(
        token: str,
        jwt_manager: JWTAuthManagerInterface
) -> AccessTokenPayload:
    try:
        token_payload = jwt_manager.decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    except TokenExpiredError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired."
        )
    if not isinstance(token_payload.get("user_id"), int):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    return token_payload


def get_required_access_token_payload(
        token: str = Depends(get_token),
        jwt_manager: JWTAuthManagerInterface = Depends(get_jwt_auth_manager)
) -> AccessTokenPayload:
    return get_access_token_payload(token=token, jwt_manager=jwt_manager)


def get_optional_access_token_payload(
        token: str | None = Depends(get_token_or_none),
        jwt_manager: JWTAuthManagerInterface = Depends(get_jwt_auth_manager)
) -> AccessTokenPayload | None:
    """
    Principal for endpoints that are public but show more to the owner.

    A missing header means an anonymous caller; a present but broken token
    is still rejected with 401.
    """
    if token is None:
        return None
    return get_access_token_payload(token=token, jwt_manager=jwt_manager)
