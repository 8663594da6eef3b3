"""
HTTP endpoints for user accounts.

Validation runs in a fixed order and the first failing check is the one
reported.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, status

from api.config import config
from api.dependencies import Pagination, get_pagination, get_users_service
from api.errors import ErrorType, error_responder
from api.models import (
    MessageResponse, UserCreateRequest, UserLoginRequest,
    UserResponse, UserUpdateRequest
)
from api.users.service import UsersService
from utilities.password import hash_password, password_matched

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.get("", response_model=List[UserResponse])
async def get_users(
    pagination: Pagination = Depends(get_pagination),
    service: UsersService = Depends(get_users_service)
):
    """
    Get a page of users.

    - **offset**: Number of users to skip (default 0)
    - **limit**: Maximum number of users to return (default 10)
    """
    users = await service.get_users(pagination.offset, pagination.limit)
    return [UserResponse.from_record(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: UsersService = Depends(get_users_service)):
    """Get a single user by ID."""
    user = await service.get_user(user_id)
    if not user:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "User not found")
    return UserResponse.from_record(user)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreateRequest,
    service: UsersService = Depends(get_users_service)
):
    """Register a new user."""
    if not payload.email:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Email is required")

    if not payload.full_name:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Full name is required")

    if await service.email_exists(payload.email):
        raise error_responder(ErrorType.EMAIL_ALREADY_TAKEN, "Email already exists")

    password = payload.password or ""
    if len(password) < config.password_min_length:
        raise error_responder(
            ErrorType.VALIDATION_ERROR,
            f"Password must be at least {config.password_min_length} characters long"
        )

    if password != payload.confirm_password:
        raise error_responder(
            ErrorType.VALIDATION_ERROR,
            "Password and confirm password do not match"
        )

    hashed_password = await hash_password(password)
    success = await service.create_user(payload.email, hashed_password, payload.full_name)
    if not success:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Failed to create user")

    logger.info("User created", email=payload.email)
    return MessageResponse(message="User created successfully")


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    service: UsersService = Depends(get_users_service)
):
    """Update the email and full name of a user. The password is left as is."""
    user = await service.get_user(user_id)
    if not user:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "User not found")

    if not payload.email:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Email is required")

    if not payload.full_name:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Full name is required")

    if payload.email != user.email and await service.email_exists(payload.email):
        raise error_responder(ErrorType.EMAIL_ALREADY_TAKEN, "Email already exists")

    success = await service.update_user(user_id, payload.email, payload.full_name)
    if not success:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Failed to update user")

    logger.info("User updated", user_id=user_id)
    return MessageResponse(message="User updated successfully")


@router.post("/login", response_model=MessageResponse)
async def login_user(
    payload: UserLoginRequest,
    service: UsersService = Depends(get_users_service)
):
    """
    Check a user's credentials.

    An unknown email and a wrong password get the same response.
    """
    if not payload.email or not payload.password:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Email and password are required")

    user = await service.get_user_by_email(payload.email)
    if not user:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, INVALID_CREDENTIALS)

    if not await password_matched(payload.password, user.password):
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, INVALID_CREDENTIALS)

    return MessageResponse(message="Login successful")


@router.post("/{user_id}/change-password", response_model=MessageResponse)
async def change_password(user_id: str):
    """Change a user's password. Not available yet: always answers 501."""
    raise error_responder(ErrorType.NOT_IMPLEMENTED)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, service: UsersService = Depends(get_users_service)):
    """Delete a user."""
    success = await service.delete_user(user_id)
    if not success:
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Failed to delete user")

    logger.info("User deleted", user_id=user_id)
    return MessageResponse(message="User deleted successfully")
