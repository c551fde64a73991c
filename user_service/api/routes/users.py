"""User Routes — CRUD endpoints over the single user collection.

Invariants:
    - Every route gets the shared repository via Depends(get_user_repository)
    - Empty or malformed ids → 400, unknown ids → 404, store failures → 500
    - Update re-reads the document after a matched write; the response is the stored state
    - Routes never build filter/update documents (delegated to the repository)

Design Decisions:
    - Errors raised as UserServiceError and rendered by the global handler
      (ADR: one error envelope for every route)
    - {user_id:path} captures the whole remainder, including an empty id and
      decoded slashes (/user/%2F), so every such id reaches parse_user_id and
      gets the 400 instead of a slash redirect or 404
"""

import logging

from fastapi import APIRouter, Depends, status

from user_service.core.errors import UserNotFoundError
from user_service.core.repository_protocols import UserRepository
from user_service.infrastructure.database import get_user_repository
from user_service.schemas.user import UserPayload, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])

UPDATE_NOT_FOUND_MESSAGE = "No user found with specified ID"
DELETE_NOT_FOUND_MESSAGE = "User with specified ID not found!"
DELETE_SUCCESS_MESSAGE = "User successfully deleted!"


@router.post(
    "/user", response_model=UserResponse, status_code=status.HTTP_200_OK,
)
async def create_user(
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    """Create a user. Any id in the body is ignored; the store assigns one."""
    user = await repo.create(body.to_user())
    return UserResponse.from_user(user)


@router.get("/user/{user_id:path}", response_model=UserResponse)
async def get_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.get_by_id(user_id)
    return UserResponse.from_user(user)


@router.put("/user/{user_id:path}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    """Overwrite name/location/title, then return the re-read document."""
    outcome = await repo.update_by_id(user_id, body.to_user())
    if not outcome.found:
        raise UserNotFoundError(user_id, UPDATE_NOT_FOUND_MESSAGE)
    user = await repo.get_by_id(user_id)
    return UserResponse.from_user(user)


@router.delete("/user/{user_id:path}")
async def delete_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
) -> str:
    outcome = await repo.delete_by_id(user_id)
    if not outcome.found:
        raise UserNotFoundError(user_id, DELETE_NOT_FOUND_MESSAGE)
    return DELETE_SUCCESS_MESSAGE


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    repo: UserRepository = Depends(get_user_repository),
):
    users = await repo.list_all()
    return [UserResponse.from_user(u) for u in users]
