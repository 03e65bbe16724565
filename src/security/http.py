from fastapi import Request, HTTPException, status

BEARER_SCHEME = "bearer"


def parse_bearer(authorization: str) -> str:
    """
    Split an Authorization header value into scheme and credentials.

    :param authorization: Raw header value, e.g. "Bearer eyJ...".
    :return: The credentials part.
    :raises HTTPException: 401 if the scheme is not Bearer or nothing follows it.
    """
    scheme, _, token = authorization.strip().partition(" ")

    if scheme.lower() != BEARER_SCHEME or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format. Expected 'Bearer <token>'"
        )
    return token.strip()


def get_token(request: Request) -> str:
    """Bearer token of a request that must be authenticated."""
    token = get_token_or_none(request)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )
    return token


def get_token_or_none(request: Request) -> str | None:
    """
    Bearer token of a request where authentication is optional.

    A missing header yields None; a malformed one is still a 401.
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    return parse_bearer(authorization)
