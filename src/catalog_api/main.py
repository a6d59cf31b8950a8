import logging
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
)
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from catalog_api import __version__
from catalog_api.routers import get_routers
from catalog_api.shared import Logger, db, load_config
from catalog_api.shared.http import validation_exception_handler

logger = Logger(__name__, level=logging.DEBUG).get_logger()

config = load_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await db.init_db()
    yield
    db.close_db()


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(
    title=config.general.name,
    version=__version__,
    docs_url=config.general.docs_url,
    lifespan=lifespan,
)

for router in get_routers():
    app.include_router(router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.network.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Validation failures are client errors (400), not FastAPI's default 422
app.add_exception_handler(RequestValidationError, validation_exception_handler)


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    # Log server startup information
    logger.info("Starting %s on port %s", config.general.name, config.network.port)
    logger.info(
        "API docs available on http://%s:%s%s",
        config.network.host,
        config.network.port,
        config.general.docs_url,
    )


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
