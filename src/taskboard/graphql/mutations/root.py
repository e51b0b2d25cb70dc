"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.auth import AuthUser
from ..types.project import Project
from ..types.todo import ToDo


# Input types for mutations
@strawberry.input
class SignUpInput:
    """Input for registering a new user."""

    email: str
    password: str
    name: str
    avatar: str | None = None


@strawberry.input
class SignInInput:
    """Input for signing in."""

    email: str
    password: str


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Auth mutations
    @strawberry.mutation(name="signUp")
    async def sign_up(self, info: strawberry.Info, input: SignUpInput) -> AuthUser:
        """Register a new user and return a session token."""
        from ..resolvers.auth import sign_up

        return await sign_up(info, input)

    @strawberry.mutation(name="signIn")
    async def sign_in(self, info: strawberry.Info, input: SignInInput) -> AuthUser:
        """Sign in with email and password."""
        from ..resolvers.auth import sign_in

        return await sign_in(info, input)

    # Project mutations
    @strawberry.mutation(name="createProject")
    async def create_project(self, info: strawberry.Info, title: str) -> Project:
        """Create a new project owned by the current user."""
        from ..resolvers.project import create_project

        return await create_project(info, title)

    @strawberry.mutation(name="updateProject")
    async def update_project(
        self, info: strawberry.Info, id: strawberry.ID, title: str
    ) -> Project | None:
        """Rename a project."""
        from ..resolvers.project import update_project

        return await update_project(info, id, title)

    @strawberry.mutation(name="deletedProject")
    async def deleted_project(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a project."""
        from ..resolvers.project import delete_project

        return await delete_project(info, id)

    @strawberry.mutation(name="addUserToProject")
    async def add_user_to_project(
        self, info: strawberry.Info, project_id: strawberry.ID, user_id: strawberry.ID
    ) -> Project | None:
        """Add a user to a project's members."""
        from ..resolvers.project import add_user_to_project

        return await add_user_to_project(info, project_id, user_id)

    # ToDo mutations
    @strawberry.mutation(name="createToDo")
    async def create_todo(
        self, info: strawberry.Info, content: str, project_id: strawberry.ID
    ) -> ToDo:
        """Create a to-do in a project."""
        from ..resolvers.todo import create_todo

        return await create_todo(info, content, project_id)

    @strawberry.mutation(name="updateToDo")
    async def update_todo(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        content: str | None = None,
        is_completed: bool | None = None,
    ) -> ToDo | None:
        """Update a to-do's content and/or completion."""
        from ..resolvers.todo import update_todo

        return await update_todo(info, id, content, is_completed)

    @strawberry.mutation(name="deleteToDo")
    async def delete_todo(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a to-do."""
        from ..resolvers.todo import delete_todo

        return await delete_todo(info, id)
