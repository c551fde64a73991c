"""Store Connection Manager — single Motor client with error translation and health checks.

Invariants:
    - One AsyncIOMotorClient per process, created on startup, closed on shutdown
    - Every driver exception is mapped to StoreError / StoreUnavailableError (core/errors.py)
    - Each round trip is bounded by timeoutMS (store_timeout_ms setting)

Design Decisions:
    - Singleton mongo_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - Repository built once alongside the client: handlers share it read-only,
      Motor owns connection pooling so no locking is needed here
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorCollection,
)
from pymongo.errors import (
    ConnectionFailure, ExecutionTimeout, NetworkTimeout,
    OperationFailure, PyMongoError, ServerSelectionTimeoutError, WriteError,
)

from user_service.core.errors import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_store_errors(operation: str) -> AsyncGenerator[None, None]:
    """Map pymongo exceptions raised inside the block to typed store errors."""
    try:
        yield
    except (ServerSelectionTimeoutError, NetworkTimeout, ExecutionTimeout) as e:
        logger.error(f"Store timeout during {operation}: {e}")
        raise StoreUnavailableError(str(e), operation) from e
    except ConnectionFailure as e:
        logger.error(f"Store connection error during {operation}: {e}")
        raise StoreUnavailableError(str(e), operation) from e
    except WriteError as e:
        logger.error(f"Store write error during {operation}: {e}")
        raise StoreError(str(e), operation) from e
    except OperationFailure as e:
        logger.error(f"Store operation failure during {operation}: {e}")
        raise StoreError(str(e), operation) from e
    except PyMongoError as e:
        logger.error(f"Store error during {operation}: {e}")
        raise StoreError(str(e), operation) from e


class MongoConnectionManager:
    """Owns the Motor client and the users collection handle."""

    def __init__(
        self,
        mongo_uri: str,
        database: str,
        collection: str,
        timeout_ms: int = 5000,
    ):
        self.client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=timeout_ms,
            timeoutMS=timeout_ms,
        )
        self.database_name = database
        self.collection_name = collection

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.client[self.database_name][self.collection_name]

    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            async with translate_store_errors("ping"):
                await self.client.admin.command("ping")
            return True
        except StoreError as e:
            logger.error(f"Store health check failed: {e.message}")
            return False

    def close(self) -> None:
        self.client.close()


# Singletons (initialized on startup)
mongo_manager: MongoConnectionManager | None = None
user_repository = None


def init_db(mongo_uri: str, database: str, collection: str, **kwargs) -> None:
    global mongo_manager, user_repository
    from user_service.infrastructure.user_repository import MongoUserRepository

    mongo_manager = MongoConnectionManager(mongo_uri, database, collection, **kwargs)
    user_repository = MongoUserRepository(mongo_manager.collection)
    logger.info(
        f"Store client ready for {database}.{collection}",
        extra={"operation": "init"},
    )


def close_db() -> None:
    global mongo_manager, user_repository
    if mongo_manager is not None:
        mongo_manager.close()
    mongo_manager = None
    user_repository = None


def get_user_repository():
    """FastAPI dependency for the shared user repository."""
    if user_repository is None:
        raise RuntimeError("Database not initialized")
    return user_repository
