from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class CredentialsDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        # usernames are compared byte-exact, so reject what cannot be typed back
        if value != value.strip() or any(ch.isspace() or not ch.isprintable() for ch in value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username must not contain whitespace or control characters",
                {},
            )
        return value


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class AuthTokenDTO(BaseModel):
    username: str
    token: str
