from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from database import accounts_validators
from schemas.base import CamelSchema, reject_explicit_null
from schemas.examples.accounts import (
    user_schema_example,
    user_update_request_schema_example,
)


class UserSchema(CamelSchema):
    id: int
    username: str
    email: str
    bio: Optional[str]
    avatar_url: Optional[str]
    created_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                user_schema_example
            ]
        }
    }


class UserUpdateRequestSchema(CamelSchema):
    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = Field(None, max_length=2048)

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                user_update_request_schema_example
            ]
        }
    }

    check_not_null = field_validator("username", "email")(reject_explicit_null)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value):
        return accounts_validators.validate_username(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return accounts_validators.validate_email(value)
