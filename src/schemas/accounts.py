from pydantic import field_validator

from database import accounts_validators
from schemas.base import CamelSchema
from schemas.examples.accounts import (
    user_registration_request_schema_example,
    user_login_request_schema_example,
    user_login_response_schema_example,
)


class UserRegistrationRequestSchema(CamelSchema):
    username: str
    email: str
    password: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                user_registration_request_schema_example
            ]
        }
    }

    @field_validator("username")
    @classmethod
    def validate_username(cls, value):
        return accounts_validators.validate_username(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return accounts_validators.validate_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        return accounts_validators.validate_password_strength(value)


class UserLoginRequestSchema(CamelSchema):
    username: str
    password: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                user_login_request_schema_example
            ]
        }
    }


class UserLoginResponseSchema(CamelSchema):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

    model_config = {
        "json_schema_extra": {
            "examples": [
                user_login_response_schema_example
            ]
        }
    }


class TokenRefreshRequestSchema(CamelSchema):
    refresh_token: str


class TokenRefreshResponseSchema(CamelSchema):
    access_token: str
    token_type: str = "bearer"


class MessageResponseSchema(CamelSchema):
    message: str
