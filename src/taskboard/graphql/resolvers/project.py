from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..access_control import get_store, require_user

if TYPE_CHECKING:
    from ...database.models import ToDoRecord
    from ..types.project import Project
    from ..types.todo import ToDo
    from ..types.user import User

logger = get_logger(__name__)


def calculate_progress(todos: Sequence[ToDoRecord]) -> float:
    """Return the completed share of ``todos`` as a percentage (0 when empty)."""
    if not todos:
        return 0.0
    completed = sum(1 for todo in todos if todo.is_completed)
    return 100.0 * completed / len(todos)


# Query resolvers
async def resolve_my_projects(info: strawberry.Info) -> list[Project]:
    """Resolve every project the caller is a member of."""
    user = require_user(info, "myProjects")

    records = await get_store(info).list_projects_for_member(user.id)

    from ..types.project import Project as ProjectType

    return [ProjectType.from_record(record) for record in records]


async def resolve_project_by_id(info: strawberry.Info, id: str) -> Project | None:
    """
    Resolve a project by its ID.

    Any signed-in user may read any project; membership is not checked.
    """
    require_user(info, "getProject")

    record = await get_store(info).get_project(id)
    if not record:
        logger.info("Project not found", project_id=id)
        return None

    from ..types.project import Project as ProjectType

    return ProjectType.from_record(record)


# Project field resolvers
async def resolve_project_progress(project: Project, info: strawberry.Info) -> float:
    """Recompute progress from the project's to-dos on every read."""
    todos = await get_store(info).list_todos_for_project(project.id)
    return calculate_progress(todos)


async def resolve_project_users(project: Project, info: strawberry.Info) -> list[User]:
    """
    Resolve the members of a project, one user lookup per member id.

    Members whose user document no longer exists are skipped.
    """
    store = get_store(info)
    records = await asyncio.gather(
        *(store.get_user(user_id) for user_id in project.member_user_ids)
    )

    from ..types.user import User as UserType

    return [UserType.from_record(record) for record in records if record is not None]


async def resolve_project_todos(project: Project, info: strawberry.Info) -> list[ToDo]:
    records = await get_store(info).list_todos_for_project(project.id)

    from ..types.todo import ToDo as ToDoType

    return [ToDoType.from_record(record) for record in records]


# Mutation resolvers
async def create_project(info: strawberry.Info, title: str) -> Project:
    """
    Create a new project.

    The authenticated user becomes its first and only member.
    """
    user = require_user(info, "createProject")

    record = await get_store(info).insert_project(
        title=title,
        created_at=datetime.now(UTC),
        member_user_ids=[user.id],
    )

    logger.info("Project created", project_id=record.id, user_id=user.id, title=record.title)

    from ..types.project import Project as ProjectType

    return ProjectType.from_record(record)


async def update_project(info: strawberry.Info, id: str, title: str) -> Project | None:
    """Rename a project. Returns None if the project does not exist."""
    user = require_user(info, "updateProject")

    record = await get_store(info).update_project_title(id, title)
    if not record:
        logger.info("Project not found for update", project_id=id)
        return None

    logger.info("Project updated", project_id=record.id, user_id=user.id, title=record.title)

    from ..types.project import Project as ProjectType

    return ProjectType.from_record(record)


async def delete_project(info: strawberry.Info, id: str) -> bool:
    """
    Delete a project.

    Returns True whether or not a project was removed. The project's to-dos
    are left in place.
    """
    user = require_user(info, "deletedProject")

    await get_store(info).delete_project(id)

    logger.info("Project deleted", project_id=id, user_id=user.id)
    return True


async def add_user_to_project(
    info: strawberry.Info, project_id: str, user_id: str
) -> Project | None:
    """
    Add a member to a project.

    Returns None if the project does not exist and the unchanged project if
    the user is already a member.
    """
    caller = require_user(info, "addUserToProject")
    store = get_store(info)

    from ..types.project import Project as ProjectType

    record = await store.get_project(project_id)
    if not record:
        logger.info("Project not found for member addition", project_id=project_id)
        return None

    if record.has_member(user_id):
        logger.debug("User already a project member", project_id=project_id, member_id=user_id)
        return ProjectType.from_record(record)

    updated = await store.add_project_member(project_id, user_id)
    if not updated:
        # Deleted between the read and the update
        return None

    logger.info(
        "Project member added",
        project_id=project_id,
        member_id=user_id,
        user_id=caller.id,
    )
    return ProjectType.from_record(updated)
