from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from catalog_api.models.schema import DOCUMENT_MODELS
from catalog_api.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()

_client: AsyncIOMotorClient | None = None


def create_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(config.database.uri)


async def init_db() -> AsyncIOMotorDatabase:
    """Open the MongoDB client and bind the document models to it."""
    global _client

    _client = create_client()
    database = _client[config.database.name]

    try:
        await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    except Exception as e:
        logger.error("Failed to initialise database %s: %s", config.database.name, e)
        raise

    logger.info("Connected to MongoDB database: %s", config.database.name)
    return database


def close_db() -> None:
    global _client

    if _client is not None:
        _client.close()
        logger.info("Closed MongoDB connection")
    _client = None
