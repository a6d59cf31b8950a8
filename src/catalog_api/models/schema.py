from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field


class User(Document):
    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")
    nickname: Annotated[str, Indexed(unique=True)] = Field(
        ..., description="Unique login name"
    )
    password: str = Field(..., description="bcrypt hash of the user's password")

    class Settings:
        name = "users"


class Product(Document):
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price")

    class Settings:
        name = "products"


# Registered with beanie on startup
DOCUMENT_MODELS: list[type[Document]] = [User, Product]
