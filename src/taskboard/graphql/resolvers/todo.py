from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.models import ToDoChanges
from ...errors import ProjectNotFound
from ...logging import get_logger
from ..access_control import get_store, require_user

if TYPE_CHECKING:
    from ..types.project import Project
    from ..types.todo import ToDo

logger = get_logger(__name__)


# ToDo field resolvers
async def resolve_todo_project(todo: ToDo, info: strawberry.Info) -> Project:
    """Resolve the owning project; a to-do outliving its project is an error."""
    record = await get_store(info).get_project(todo.project_id)
    if not record:
        logger.warning(
            "To-do refers to a missing project", todo_id=todo.id, project_id=todo.project_id
        )
        raise ProjectNotFound(f"Project {todo.project_id} not found")

    from ..types.project import Project as ProjectType

    return ProjectType.from_record(record)


# Mutation resolvers
async def create_todo(info: strawberry.Info, content: str, project_id: str) -> ToDo:
    """
    Create an open to-do in a project.

    Neither the project's existence nor the caller's membership is checked.
    """
    user = require_user(info, "createToDo")

    record = await get_store(info).insert_todo(content=content, project_id=project_id)

    logger.info("To-do created", todo_id=record.id, project_id=project_id, user_id=user.id)

    from ..types.todo import ToDo as ToDoType

    return ToDoType.from_record(record)


async def update_todo(
    info: strawberry.Info,
    id: str,
    content: str | None = None,
    is_completed: bool | None = None,
) -> ToDo | None:
    """Update the supplied fields of a to-do. Returns None if it does not exist."""
    user = require_user(info, "updateToDo")

    changes = ToDoChanges(content=content, is_completed=is_completed)
    record = await get_store(info).update_todo(id, changes)
    if not record:
        logger.info("To-do not found for update", todo_id=id)
        return None

    logger.info(
        "To-do updated",
        todo_id=record.id,
        user_id=user.id,
        fields=sorted(changes.to_update()),
    )

    from ..types.todo import ToDo as ToDoType

    return ToDoType.from_record(record)


async def delete_todo(info: strawberry.Info, id: str) -> bool:
    """Delete a to-do. Returns True whether or not one was removed."""
    user = require_user(info, "deleteToDo")

    await get_store(info).delete_todo(id)

    logger.info("To-do deleted", todo_id=id, user_id=user.id)
    return True
