from contextlib import contextmanager

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.shared import Logger

__all__ = ["persistence_error_handler", "validation_exception_handler"]

logger = Logger(__name__).get_logger()


@contextmanager
def persistence_error_handler(status_code=400, stacklevel=1):
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except HTTPException:
        raise

    except Exception as e:
        logger.error("Failed to process request: %s", e, **kw)
        raise HTTPException(status_code=status_code) from e


def _violation(error: dict) -> dict:
    location = [str(part) for part in error["loc"]]
    # Drop the leading "body"/"query" marker when a field name follows it
    field = ".".join(location[1:]) or location[0]
    return {"field": field, "message": error["msg"], "type": error["type"]}


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    violations = [_violation(error) for error in exc.errors()]
    logger.warning(
        "Rejected %s %s: %s", request.method, request.url.path, violations
    )
    return JSONResponse(status_code=400, content={"detail": violations})
