from typing import TypedDict


class AccessTokenPayload(TypedDict):
    """Claims the API relies on after an access token is decoded."""

    user_id: int
