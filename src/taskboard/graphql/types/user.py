"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database.models import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str
    avatar: str | None

    @classmethod
    def from_record(cls, record: "UserRecord") -> "User":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            avatar=record.avatar,
        )
