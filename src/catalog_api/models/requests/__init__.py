from .auth import LoginRequest, LoginResponse, LogoutResponse
from .products import CreateProductRequest, ProductResponse, UpdateProductRequest
from .serde_base import SerdeBase
from .users import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "CreateProductRequest",
    "CreateUserRequest",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "ProductResponse",
    "SerdeBase",
    "UpdateProductRequest",
    "UpdateUserRequest",
    "UserResponse",
]
