"""
ToDo GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...database.models import ToDoRecord
    from .project import Project


@strawberry.type(name="ToDo")
class ToDo:
    """To-do item type for GraphQL API."""

    id: strawberry.ID
    content: str
    is_completed: bool
    project_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: "ToDoRecord") -> "ToDo":
        return cls(
            id=strawberry.ID(record.id),
            content=record.content,
            is_completed=record.is_completed,
            project_id=record.project_id,
        )

    @strawberry.field
    async def project(
        self, info: strawberry.Info
    ) -> Annotated["Project", strawberry.lazy(".project")]:
        """Get the project this to-do belongs to."""
        from ..resolvers.todo import resolve_todo_project

        return await resolve_todo_project(self, info)
