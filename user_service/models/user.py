"""User Document — maps between the Mongo document shape and the domain User.

Invariants:
    - Stored documents are {_id: ObjectId, name, location, title}
    - id is None only before insertion; every document read back has one
    - Identifier is never part of the writable field set (insert lets the store
      assign it, update only $sets name/location/title)

Design Decisions:
    - dataclass over an ODM document: the repository issues raw filter/update
      documents, so a mapping layer is all that is needed (ADR: thin repository)
    - UPDATABLE_FIELDS is the single source for both insert and $set documents
"""

from dataclasses import dataclass
from typing import Any

from user_service.core.domain_types import UserId, to_user_id

UPDATABLE_FIELDS = ("name", "location", "title")


@dataclass
class User:
    """A user record. id is the hex ObjectId string once stored."""
    name: str
    location: str
    title: str
    id: UserId | None = None

    def field_values(self) -> dict[str, str]:
        """Writable fields only — used for insert and $set documents."""
        return {key: getattr(self, key) for key in UPDATABLE_FIELDS}

    def to_insert_document(self) -> dict[str, Any]:
        return self.field_values()

    def to_set_document(self) -> dict[str, Any]:
        return {"$set": self.field_values()}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        return cls(
            id=to_user_id(document["_id"]),
            name=document["name"],
            location=document["location"],
            title=document["title"],
        )
