"""Boundary Protocols — contracts between the HTTP handlers and persistence.

Invariants:
    - Handlers depend on UserRepository, never on Motor types
    - Every method either returns its documented value or raises a UserServiceError
    - Outcome types carry counts so callers can tell "not found" from "written"

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Outcomes as frozen dataclasses: driver result objects never leak past the repository
"""

from dataclasses import dataclass
from typing import Protocol

from user_service.models.user import User


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of update_by_id — matched_count is 0 or 1."""
    matched_count: int
    modified_count: int

    @property
    def found(self) -> bool:
        return self.matched_count == 1


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of delete_by_id — deleted_count is 0 or 1."""
    deleted_count: int

    @property
    def found(self) -> bool:
        return self.deleted_count == 1


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def create(self, user: User) -> User: ...
    async def get_by_id(self, user_id: str) -> User: ...
    async def update_by_id(self, user_id: str, user: User) -> UpdateOutcome: ...
    async def delete_by_id(self, user_id: str) -> DeleteOutcome: ...
    async def list_all(self) -> list[User]: ...
