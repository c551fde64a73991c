"""User Schemas — Pydantic models for the /user and /users API boundary.

Invariants:
    - UserPayload requires name, location, title as strings (no further validation)
    - A client-supplied id is accepted but ignored (identifiers are store-assigned)
    - UserResponse always carries a non-empty id

Design Decisions:
    - strict str fields: numbers/bools are rejected, not coerced (ADR: pass-through fields)
    - extra="ignore": clients echoing a full UserResponse back on PUT still validate
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from user_service.models.user import User


class UserPayload(BaseModel):
    """Create/update body — the three writable user fields."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    location: StrictStr
    title: StrictStr

    def to_user(self) -> User:
        return User(name=self.name, location=self.location, title=self.title)


class UserResponse(BaseModel):
    """User as returned by every read/write endpoint."""
    id: str = Field(min_length=1)
    name: str
    location: str
    title: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id, name=user.name,
            location=user.location, title=user.title,
        )
