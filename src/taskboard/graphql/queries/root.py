"""
Root GraphQL query definitions
"""

import strawberry

from ..types.project import Project


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="myProjects")
    async def my_projects(self, info: strawberry.Info) -> list[Project]:
        """Get the projects the current user is a member of."""
        from ..resolvers.project import resolve_my_projects

        return await resolve_my_projects(info)

    @strawberry.field(name="getProject")
    async def get_project(self, info: strawberry.Info, id: strawberry.ID) -> Project | None:
        """Get a project by ID."""
        from ..resolvers.project import resolve_project_by_id

        return await resolve_project_by_id(info, id)
