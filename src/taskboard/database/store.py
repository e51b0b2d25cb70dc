"""Document store interface used by the resolver layer."""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import ProjectRecord, ToDoChanges, ToDoRecord, UserRecord

# Canonical collection names
USERS_COLLECTION = "Users"
PROJECTS_COLLECTION = "Projects"
TODOS_COLLECTION = "ToDos"


class DocumentStore(ABC):
    """Abstract base class for the persistence backend.

    Every method is a single-document operation (or a single query) with no
    transaction spanning several calls. Identifiers are plain strings; an
    implementation raises ``InvalidIdentifier`` for strings it cannot map to a
    document id and ``StoreError`` for backend failures.
    """

    # Users

    @abstractmethod
    async def insert_user(
        self, *, name: str, email: str, password_hash: str, avatar: str | None = None
    ) -> UserRecord:
        """Insert a user. Email uniqueness is not enforced."""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> UserRecord | None:
        pass

    @abstractmethod
    async def find_user_by_email(self, email: str) -> UserRecord | None:
        pass

    # Projects

    @abstractmethod
    async def insert_project(
        self, *, title: str, created_at: datetime, member_user_ids: list[str]
    ) -> ProjectRecord:
        pass

    @abstractmethod
    async def get_project(self, project_id: str) -> ProjectRecord | None:
        pass

    @abstractmethod
    async def list_projects_for_member(self, user_id: str) -> list[ProjectRecord]:
        """Return every project whose member set contains ``user_id``."""
        pass

    @abstractmethod
    async def update_project_title(self, project_id: str, title: str) -> ProjectRecord | None:
        """Set the title and return the updated project, or None if it does not exist."""
        pass

    @abstractmethod
    async def delete_project(self, project_id: str) -> None:
        """Delete a project. Deleting a missing project is not an error."""
        pass

    @abstractmethod
    async def add_project_member(self, project_id: str, user_id: str) -> ProjectRecord | None:
        """Atomically add ``user_id`` to the member set.

        Adding an existing member leaves the set unchanged. Returns the updated
        project, or None if it does not exist.
        """
        pass

    # ToDos

    @abstractmethod
    async def insert_todo(
        self, *, content: str, project_id: str, is_completed: bool = False
    ) -> ToDoRecord:
        pass

    @abstractmethod
    async def get_todo(self, todo_id: str) -> ToDoRecord | None:
        pass

    @abstractmethod
    async def list_todos_for_project(self, project_id: str) -> list[ToDoRecord]:
        pass

    @abstractmethod
    async def update_todo(self, todo_id: str, changes: ToDoChanges) -> ToDoRecord | None:
        """Apply the supplied fields and return the updated to-do, or None if missing."""
        pass

    @abstractmethod
    async def delete_todo(self, todo_id: str) -> None:
        """Delete a to-do. Deleting a missing to-do is not an error."""
        pass

    # Maintenance

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the lookup indexes used by the queries above."""
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Round-trip to the backend; raises ``StoreError`` when unreachable."""
        pass
