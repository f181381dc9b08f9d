from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from byteblog.application.services.password_hashing import MAX_PASSWORD_LENGTH


class CredentialsDTO(BaseModel):
    username: str = Field("", max_length=64)
    password: str = Field("", max_length=MAX_PASSWORD_LENGTH)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        return value.strip()


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass
