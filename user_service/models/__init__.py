"""Document Models — mapping between stored documents and domain entities.

Invariants:
    - One file per entity
"""

from user_service.models.user import User  # noqa: F401
