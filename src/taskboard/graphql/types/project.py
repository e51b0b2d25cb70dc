"""
Project GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .user import User

if TYPE_CHECKING:
    from ...database.models import ProjectRecord
    from .todo import ToDo


@strawberry.type
class Project:
    """Project type for GraphQL API."""

    id: strawberry.ID
    title: str
    created_at: str
    member_user_ids: strawberry.Private[list[str]]

    @classmethod
    def from_record(cls, record: "ProjectRecord") -> "Project":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            created_at=record.created_at.isoformat(),
            member_user_ids=list(record.member_user_ids),
        )

    @strawberry.field
    async def progress(self, info: strawberry.Info) -> float:
        """Percentage of this project's to-dos that are completed."""
        from ..resolvers.project import resolve_project_progress

        return await resolve_project_progress(self, info)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get the members of this project."""
        from ..resolvers.project import resolve_project_users

        return await resolve_project_users(self, info)

    @strawberry.field
    async def todos(
        self, info: strawberry.Info
    ) -> list[Annotated["ToDo", strawberry.lazy(".todo")]]:
        """Get the to-dos of this project."""
        from ..resolvers.project import resolve_project_todos

        return await resolve_project_todos(self, info)
