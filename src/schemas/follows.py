from datetime import datetime

from pydantic import Field

from schemas.base import CamelSchema


class FollowCreateSchema(CamelSchema):
    following_id: int = Field(..., ge=1)


class FollowSchema(CamelSchema):
    id: int
    follower_id: int
    following_id: int
    created_at: datetime


class FollowStatusSchema(CamelSchema):
    is_following: bool
