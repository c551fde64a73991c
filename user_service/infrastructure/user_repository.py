"""Mongo User Repository — CRUD over the users collection via Motor.

Invariants:
    - Every method performs exactly one store round trip
    - Identifiers are parsed before any IO; malformed ids never reach the driver
    - get_by_id raises UserNotFoundError on a miss; update/delete report counts instead
    - Update never writes _id: the $set document holds name/location/title only
    - A stored document missing name/location/title surfaces as StoreError, not KeyError

Design Decisions:
    - Collection injected, not looked up: the same instance is shared by all requests
      and tests substitute an in-memory collection (ADR: testability)
    - list_all drains the cursor into a list: no pagination by design of the API
"""

import logging

from motor.motor_asyncio import AsyncIOMotorCollection

from user_service.core.domain_types import parse_user_id, to_user_id
from user_service.core.errors import StoreError, UserNotFoundError
from user_service.core.repository_protocols import DeleteOutcome, UpdateOutcome
from user_service.infrastructure.database import translate_store_errors
from user_service.models.user import User

logger = logging.getLogger(__name__)


class MongoUserRepository:
    """Implements UserRepository against a Motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def create(self, user: User) -> User:
        """Insert a user, ignoring any supplied id. Returns the stored user."""
        document = user.to_insert_document()
        async with translate_store_errors("insert"):
            result = await self._collection.insert_one(document)
        if not result.acknowledged or result.inserted_id is None:
            raise StoreError("write was not acknowledged", "insert")
        user_id = to_user_id(result.inserted_id)
        logger.info(
            f"User {user_id} created",
            extra={"user_id": user_id, "operation": "insert"},
        )
        return User(
            id=user_id, name=user.name,
            location=user.location, title=user.title,
        )

    async def get_by_id(self, user_id: str) -> User:
        object_id = parse_user_id(user_id)
        async with translate_store_errors("find"):
            document = await self._collection.find_one({"_id": object_id})
        if document is None:
            logger.warning(
                f"User {user_id} not found",
                extra={"user_id": user_id, "operation": "find"},
            )
            raise UserNotFoundError(user_id)
        return _user_from_document(document, "find")

    async def update_by_id(self, user_id: str, user: User) -> UpdateOutcome:
        object_id = parse_user_id(user_id)
        async with translate_store_errors("update"):
            result = await self._collection.update_one(
                {"_id": object_id}, user.to_set_document(),
            )
        outcome = UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )
        logger.info(
            f"User {user_id} update matched={outcome.matched_count} "
            f"modified={outcome.modified_count}",
            extra={"user_id": user_id, "operation": "update"},
        )
        return outcome

    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        object_id = parse_user_id(user_id)
        async with translate_store_errors("delete"):
            result = await self._collection.delete_one({"_id": object_id})
        outcome = DeleteOutcome(deleted_count=result.deleted_count)
        logger.info(
            f"User {user_id} delete deleted={outcome.deleted_count}",
            extra={"user_id": user_id, "operation": "delete"},
        )
        return outcome

    async def list_all(self) -> list[User]:
        users: list[User] = []
        async with translate_store_errors("find"):
            async for document in self._collection.find({}):
                users.append(_user_from_document(document, "find"))
        return users


def _user_from_document(document: dict, operation: str) -> User:
    """Map a stored document, treating a missing field as a store failure."""
    try:
        return User.from_document(document)
    except KeyError as e:
        raise StoreError(
            f"document {document.get('_id')} is missing field {e.args[0]!r}",
            operation,
        ) from e
