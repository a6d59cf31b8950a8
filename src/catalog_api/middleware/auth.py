from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from catalog_api.core.security import decode_access_token
from catalog_api.shared import Logger

logger = Logger(__name__).get_logger()

bearer_scheme = HTTPBearer(auto_error=False)


async def verify_token(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> str:
    """Resolve the ``Authorization: Bearer`` header to a user id.

    The id is also stored on ``request.state.user_id`` for downstream handlers.
    """
    if credentials is None:
        logger.warning("No bearer token on %s %s", request.method, request.url.path)
        raise HTTPException(status_code=403, detail="No token provided.")

    token_data = decode_access_token(credentials.credentials)
    request.state.user_id = token_data.id
    logger.debug("Authenticated user %s", token_data.id)
    return token_data.id


CurrentUserId = Annotated[str, Depends(verify_token)]
