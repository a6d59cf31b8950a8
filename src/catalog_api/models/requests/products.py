from typing import Self

from pydantic import Field

from catalog_api.models.schema import Product

from .serde_base import SerdeBase


class CreateProductRequest(SerdeBase):
    name: str = Field(..., min_length=1)
    price: float = Field(..., strict=True)


class UpdateProductRequest(SerdeBase):
    name: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, strict=True)


class ProductResponse(SerdeBase):
    id: str
    name: str
    price: float

    @classmethod
    def from_document(cls, product: Product) -> Self:
        return cls(id=str(product.id), name=product.name, price=product.price)
