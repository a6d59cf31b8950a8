from pydantic import Field

from .serde_base import SerdeBase


class LoginRequest(SerdeBase):
    nickname: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(SerdeBase):
    auth: bool = True
    token: str
    user_id: str = Field(..., alias="userId")


class LogoutResponse(SerdeBase):
    # Tokens are stateless; the client discards its copy
    auth: bool = False
    token: str | None = None
