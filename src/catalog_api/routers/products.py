from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.core.documents import get_or_404
from catalog_api.models.requests import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from catalog_api.models.schema import Product
from catalog_api.shared import Logger
from catalog_api.shared.http import persistence_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/product", tags=["Product"])


@router.get("", response_model=list[ProductResponse], summary="List all products")
async def list_products():
    with persistence_error_handler():
        products = await Product.find_all().to_list()

    return [ProductResponse.from_document(product) for product in products]


@router.get("/{product_id}", response_model=ProductResponse, summary="Get a product by id")
async def get_product(product_id: str):
    with persistence_error_handler():
        product = await get_or_404(Product, product_id)

    return ProductResponse.from_document(product)


@router.post("", response_model=ProductResponse, status_code=201, summary="Create a product")
async def create_product(data: CreateProductRequest):
    with persistence_error_handler():
        product = Product(name=data.name, price=data.price)
        await product.insert()

    logger.info("Product created: %s (%s)", product.name, product.id)
    return ProductResponse.from_document(product)


@router.put("/{product_id}", response_model=ProductResponse, summary="Update a product")
async def update_product(product_id: str, data: UpdateProductRequest):
    """Merge the provided fields into the stored product."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    with persistence_error_handler():
        product = await get_or_404(Product, product_id)
        for field, value in changes.items():
            setattr(product, field, value)
        await product.save()

    logger.info("Product %s updated fields: %s", product_id, sorted(changes))
    return ProductResponse.from_document(product)


@router.delete("/{product_id}", summary="Delete a product")
async def delete_product(product_id: str):
    with persistence_error_handler():
        product = await get_or_404(Product, product_id)
        await product.delete()

    logger.info("Product deleted: %s", product_id)
    return JSONResponse(content={"message": "Product deleted"})
