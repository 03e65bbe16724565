from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from schemas.base import CamelSchema, reject_explicit_null
from schemas.examples.lists import (
    list_create_schema_example,
    list_schema_example,
    list_item_schema_example,
)


class ListCreateSchema(CamelSchema):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    is_public: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                list_create_schema_example
            ]
        }
    }


class ListUpdateSchema(CamelSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    is_public: Optional[bool] = None

    model_config = {"extra": "forbid"}

    check_not_null = field_validator("name", "is_public")(reject_explicit_null)


class ListSchema(CamelSchema):
    id: int
    user_id: int
    name: str
    description: Optional[str]
    is_public: bool
    created_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                list_schema_example
            ]
        }
    }


class ListItemCreateSchema(CamelSchema):
    movie_id: int = Field(..., ge=1)
    notes: Optional[str] = None


class ListItemSchema(CamelSchema):
    id: int
    list_id: int
    movie_id: int
    notes: Optional[str]
    added_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                list_item_schema_example
            ]
        }
    }
