"""Domain Types — identity type and parsing for user identifiers.

Invariants:
    - UserId is always the 24-char lowercase hex form of a BSON ObjectId
    - parse_user_id is the only place a raw path string becomes an ObjectId
    - Malformed ids raise InvalidIdError, never bson's InvalidId

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, handlers treat ids as opaque strings
    - Whitespace is stripped before validation: " " is treated as an empty id
"""

from typing import NewType

from bson import ObjectId
from bson.errors import InvalidId

from user_service.core.errors import InvalidIdError


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


def parse_user_id(raw_id: str) -> ObjectId:
    """Parse a path identifier into the store's native ObjectId."""
    candidate = (raw_id or "").strip()
    if not candidate:
        raise InvalidIdError(raw_id or "")
    try:
        return ObjectId(candidate)
    except (InvalidId, TypeError):
        raise InvalidIdError(raw_id)


def to_user_id(object_id: ObjectId) -> UserId:
    return UserId(str(object_id))
