from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool

from notebox.domain.users.entities import User


class RegisterRequestDTO(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UpdateProfileRequestDTO(BaseModel):
    name: str | None = Field(None, min_length=1)
    theme: StrictBool | None = None
    password: str | None = Field(None, min_length=1)


class UserDTO(BaseModel):
    """Public view of a user; the password hash is never serialised."""

    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    theme: bool
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            theme=user.theme,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthSuccessDTO(BaseModel):
    user: UserDTO
    token: str


class MessageDTO(BaseModel):
    message: str
