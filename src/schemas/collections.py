from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from schemas.base import CamelSchema, reject_explicit_null
from schemas.examples.collections import (
    watchlist_item_schema_example,
    favorite_schema_example,
    diary_entry_create_schema_example,
    diary_entry_schema_example,
)


class MovieRefSchema(CamelSchema):
    movie_id: int = Field(..., ge=1)


class WatchlistItemSchema(CamelSchema):
    id: int
    user_id: int
    movie_id: int
    added_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                watchlist_item_schema_example
            ]
        }
    }


class WatchlistStatusSchema(CamelSchema):
    in_watchlist: bool


class FavoriteSchema(CamelSchema):
    id: int
    user_id: int
    movie_id: int
    added_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                favorite_schema_example
            ]
        }
    }


class FavoriteStatusSchema(CamelSchema):
    in_favorites: bool


class WatchEventSchema(CamelSchema):
    """Fields shared by a diary entry and the mark-as-watched shortcut."""

    watched_at: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("watchedDate", "watchedAt", "watched_at"),
    )
    rating: Optional[int] = Field(None, ge=1, le=5)
    review: Optional[str] = None
    liked: bool = False


class DiaryEntryCreateSchema(WatchEventSchema):
    movie_id: int = Field(..., ge=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                diary_entry_create_schema_example
            ]
        }
    }


class DiaryEntryUpdateSchema(CamelSchema):
    watched_at: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("watchedDate", "watchedAt", "watched_at"),
    )
    rating: Optional[int] = Field(None, ge=1, le=5)
    review: Optional[str] = None
    liked: Optional[bool] = None

    model_config = {"extra": "forbid"}

    check_not_null = field_validator("watched_at", "liked")(reject_explicit_null)


class DiaryEntrySchema(CamelSchema):
    id: int
    user_id: int
    movie_id: int
    watched_at: datetime
    rating: Optional[int]
    review: Optional[str]
    liked: bool

    model_config = {
        "json_schema_extra": {
            "examples": [
                diary_entry_schema_example
            ]
        }
    }


class DiaryStatusSchema(CamelSchema):
    watched: bool
