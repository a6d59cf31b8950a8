from typing import Self

from pydantic import Field

from catalog_api.models.schema import User

from .serde_base import SerdeBase

PASSWORD_MIN_LENGTH = 8


class CreateUserRequest(SerdeBase):
    name: str = Field(..., min_length=1)
    age: int = Field(..., strict=True)
    nickname: str = Field(..., min_length=1)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class UpdateUserRequest(SerdeBase):
    name: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, strict=True)
    nickname: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=PASSWORD_MIN_LENGTH)


class UserResponse(SerdeBase):
    id: str
    name: str
    age: int
    nickname: str

    @classmethod
    def from_document(cls, user: User) -> Self:
        # The password hash never leaves the service
        return cls(id=str(user.id), name=user.name, age=user.age, nickname=user.nickname)
