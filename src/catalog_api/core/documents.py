from typing import TypeVar

from beanie import Document, PydanticObjectId
from bson import ObjectId
from fastapi import HTTPException

from catalog_api.shared import Logger

logger = Logger(__name__).get_logger()

T = TypeVar("T", bound=Document)


async def get_or_404(model: type[T], document_id: str) -> T:
    """Fetch a document by its hex id. Malformed ids count as missing."""
    if not ObjectId.is_valid(document_id):
        logger.debug("Malformed %s id: %s", model.__name__, document_id)
        raise HTTPException(status_code=404)

    document = await model.get(PydanticObjectId(document_id))
    if document is None:
        logger.debug("%s %s not found", model.__name__, document_id)
        raise HTTPException(status_code=404)

    return document
