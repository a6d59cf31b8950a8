from fastapi import APIRouter, HTTPException

from catalog_api.core.documents import get_or_404
from catalog_api.core.security import create_access_token, verify_password
from catalog_api.middleware import CurrentUserId
from catalog_api.models.requests import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    UserResponse,
)
from catalog_api.models.schema import User
from catalog_api.shared import Logger
from catalog_api.shared.http import persistence_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in with nickname and password",
    responses={
        401: {"description": "Wrong password"},
        404: {"description": "Unknown nickname"},
    },
)
async def login(data: LoginRequest):
    """
    Look the user up by nickname, compare the password against the stored
    hash and issue a signed bearer token carrying the user id.
    """
    logger.debug("Login attempt: %s", data.nickname)

    with persistence_error_handler(status_code=500):
        user = await User.find_one(User.nickname == data.nickname)
        if user is None:
            logger.warning("Login for unknown nickname: %s", data.nickname)
            raise HTTPException(status_code=404)

        if not verify_password(data.password, user.password):
            logger.warning("Wrong password for: %s", data.nickname)
            raise HTTPException(status_code=401)

    user_id = str(user.id)
    token = create_access_token(user_id)
    logger.info("User logged in: %s (%s)", user.nickname, user_id)

    return LoginResponse(auth=True, token=token, user_id=user_id)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(user_id: CurrentUserId):
    with persistence_error_handler():
        user = await get_or_404(User, user_id)

    return UserResponse.from_document(user)


@router.post("/logout", response_model=LogoutResponse, summary="Log out")
async def logout():
    return LogoutResponse()
