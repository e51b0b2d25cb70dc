"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from datetime import datetime
from typing import Any

import pytest
from bson import ObjectId

from taskboard.auth.tokens import TokenService
from taskboard.database.models import ProjectRecord, ToDoChanges, ToDoRecord, UserRecord
from taskboard.database.mongo import to_object_id
from taskboard.database.store import DocumentStore

TEST_SECRET = "test-secret-key-for-testing-only-0123456789"


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store for exercising resolvers end to end.

    Ids are ObjectId strings and are validated the same way as in MongoDB, so
    malformed ids raise ``InvalidIdentifier`` here too. Every method returns
    copies, so callers cannot mutate stored state by accident.
    """

    def __init__(self) -> None:
        self.users: dict[str, UserRecord] = {}
        self.projects: dict[str, ProjectRecord] = {}
        self.todos: dict[str, ToDoRecord] = {}
        self.index_calls = 0

    @staticmethod
    def _key(value: str) -> str:
        return str(to_object_id(value))

    @staticmethod
    def _copy(record: Any) -> Any:
        return record.model_copy(deep=True) if record is not None else None

    async def insert_user(
        self, *, name: str, email: str, password_hash: str, avatar: str | None = None
    ) -> UserRecord:
        record = UserRecord(
            id=str(ObjectId()), name=name, email=email, password_hash=password_hash, avatar=avatar
        )
        self.users[record.id] = record
        return self._copy(record)

    async def get_user(self, user_id: str) -> UserRecord | None:
        return self._copy(self.users.get(self._key(user_id)))

    async def find_user_by_email(self, email: str) -> UserRecord | None:
        for record in self.users.values():
            if record.email == email:
                return self._copy(record)
        return None

    async def insert_project(
        self, *, title: str, created_at: datetime, member_user_ids: list[str]
    ) -> ProjectRecord:
        record = ProjectRecord(
            id=str(ObjectId()),
            title=title,
            created_at=created_at,
            member_user_ids=[self._key(user_id) for user_id in member_user_ids],
        )
        self.projects[record.id] = record
        return self._copy(record)

    async def get_project(self, project_id: str) -> ProjectRecord | None:
        return self._copy(self.projects.get(self._key(project_id)))

    async def list_projects_for_member(self, user_id: str) -> list[ProjectRecord]:
        key = self._key(user_id)
        return [self._copy(p) for p in self.projects.values() if key in p.member_user_ids]

    async def update_project_title(self, project_id: str, title: str) -> ProjectRecord | None:
        record = self.projects.get(self._key(project_id))
        if record is None:
            return None
        record.title = title
        return self._copy(record)

    async def delete_project(self, project_id: str) -> None:
        self.projects.pop(self._key(project_id), None)

    async def add_project_member(self, project_id: str, user_id: str) -> ProjectRecord | None:
        record = self.projects.get(self._key(project_id))
        if record is None:
            return None
        member_id = self._key(user_id)
        if member_id not in record.member_user_ids:
            record.member_user_ids.append(member_id)
        return self._copy(record)

    async def insert_todo(
        self, *, content: str, project_id: str, is_completed: bool = False
    ) -> ToDoRecord:
        record = ToDoRecord(
            id=str(ObjectId()),
            content=content,
            is_completed=is_completed,
            project_id=self._key(project_id),
        )
        self.todos[record.id] = record
        return self._copy(record)

    async def get_todo(self, todo_id: str) -> ToDoRecord | None:
        return self._copy(self.todos.get(self._key(todo_id)))

    async def list_todos_for_project(self, project_id: str) -> list[ToDoRecord]:
        key = self._key(project_id)
        return [self._copy(t) for t in self.todos.values() if t.project_id == key]

    async def update_todo(self, todo_id: str, changes: ToDoChanges) -> ToDoRecord | None:
        record = self.todos.get(self._key(todo_id))
        if record is None:
            return None
        if changes.content is not None:
            record.content = changes.content
        if changes.is_completed is not None:
            record.is_completed = changes.is_completed
        return self._copy(record)

    async def delete_todo(self, todo_id: str) -> None:
        self.todos.pop(self._key(todo_id), None)

    async def ensure_indexes(self) -> None:
        self.index_calls += 1

    async def ping(self) -> None:
        return None


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret_key=TEST_SECRET, issuer="taskboard-test", audience="taskboard-test")


@pytest.fixture
def sample_user() -> UserRecord:
    return UserRecord(
        id=str(ObjectId()),
        name="Ada",
        email="ada@example.com",
        password_hash="$2b$12$notarealhashnotarealhashnotarealhashnotarealhash12",
    )


@pytest.fixture
def make_context(store: InMemoryDocumentStore, tokens: TokenService):
    """Build a resolver context dict for ``schema.execute``."""

    def _make(user: UserRecord | None = None) -> dict[str, Any]:
        return {"request": None, "store": store, "tokens": tokens, "user": user}

    return _make


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
