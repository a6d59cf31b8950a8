from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.core.documents import get_or_404
from catalog_api.core.security import hash_password
from catalog_api.models.requests import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from catalog_api.models.schema import User
from catalog_api.shared import Logger
from catalog_api.shared.http import persistence_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(tags=["User"])


@router.get("/users", response_model=list[UserResponse], summary="List all users")
async def list_users():
    with persistence_error_handler():
        users = await User.find_all().to_list()

    return [UserResponse.from_document(user) for user in users]


@router.get("/user/{user_id}", response_model=UserResponse, summary="Get a user by id")
async def get_user(user_id: str):
    with persistence_error_handler():
        user = await get_or_404(User, user_id)

    return UserResponse.from_document(user)


@router.post(
    "/users", response_model=UserResponse, status_code=201, summary="Register a user"
)
@router.post(
    "/user", response_model=UserResponse, status_code=201, include_in_schema=False
)
async def create_user(data: CreateUserRequest):
    """
    Validate the registration body, hash the password and persist the user.
    Nicknames are unique; a duplicate is rejected by the database index.
    """
    logger.debug("Registering user: %s", data.nickname)

    with persistence_error_handler():
        user = User(
            name=data.name,
            age=data.age,
            nickname=data.nickname,
            password=hash_password(data.password),
        )
        await user.insert()

    logger.info("User registered: %s (%s)", user.nickname, user.id)
    return UserResponse.from_document(user)


@router.put("/user/{user_id}", response_model=UserResponse, summary="Update a user")
async def update_user(user_id: str, data: UpdateUserRequest):
    """
    Merge the provided fields into the stored user.
    Omitted or null fields keep their current values.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])

    with persistence_error_handler():
        user = await get_or_404(User, user_id)
        for field, value in changes.items():
            setattr(user, field, value)
        await user.save()

    logger.info("User %s updated fields: %s", user_id, sorted(changes))
    return UserResponse.from_document(user)


@router.delete("/user/{user_id}", summary="Delete a user")
async def delete_user(user_id: str):
    with persistence_error_handler():
        user = await get_or_404(User, user_id)
        await user.delete()

    logger.info("User deleted: %s", user_id)
    return JSONResponse(content={"message": "User deleted"})
