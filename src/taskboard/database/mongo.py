"""MongoDB implementation of the document store."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from ..errors import InvalidIdentifier, StoreError
from ..logging import get_logger
from .models import ProjectRecord, ToDoChanges, ToDoRecord, UserRecord
from .store import PROJECTS_COLLECTION, TODOS_COLLECTION, USERS_COLLECTION, DocumentStore

logger = get_logger(__name__)


def to_object_id(value: str | ObjectId) -> ObjectId:
    """Convert an id string to an ``ObjectId``.

    Raises:
        InvalidIdentifier: If the value is not a 24-character hex id
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifier(f"Invalid id: {value!r}") from e


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as ``StoreError``."""
    try:
        yield
    except PyMongoError as e:
        logger.error("Store operation failed", operation=operation, error=str(e))
        raise StoreError(str(e)) from e


class MongoDocumentStore(DocumentStore):
    """Document store backed by a ``pymongo`` asyncio database handle."""

    def __init__(self, database: AsyncDatabase):
        self.database = database
        self.users = database.get_collection(USERS_COLLECTION)
        self.projects = database.get_collection(PROJECTS_COLLECTION)
        self.todos = database.get_collection(TODOS_COLLECTION)

    # Users

    async def insert_user(
        self, *, name: str, email: str, password_hash: str, avatar: str | None = None
    ) -> UserRecord:
        document: dict[str, Any] = {
            "name": name,
            "email": email,
            "passwordHash": password_hash,
            "avatar": avatar,
        }
        with translate_errors("insert_user"):
            result = await self.users.insert_one(document)
        document["_id"] = result.inserted_id
        return UserRecord.from_document(document)

    async def get_user(self, user_id: str) -> UserRecord | None:
        with translate_errors("get_user"):
            document = await self.users.find_one({"_id": to_object_id(user_id)})
        return UserRecord.from_document(document) if document else None

    async def find_user_by_email(self, email: str) -> UserRecord | None:
        with translate_errors("find_user_by_email"):
            document = await self.users.find_one({"email": email})
        return UserRecord.from_document(document) if document else None

    # Projects

    async def insert_project(
        self, *, title: str, created_at: datetime, member_user_ids: list[str]
    ) -> ProjectRecord:
        document: dict[str, Any] = {
            "title": title,
            "createdAt": created_at,
            "memberUserIds": [to_object_id(user_id) for user_id in member_user_ids],
        }
        with translate_errors("insert_project"):
            result = await self.projects.insert_one(document)
        document["_id"] = result.inserted_id
        return ProjectRecord.from_document(document)

    async def get_project(self, project_id: str) -> ProjectRecord | None:
        with translate_errors("get_project"):
            document = await self.projects.find_one({"_id": to_object_id(project_id)})
        return ProjectRecord.from_document(document) if document else None

    async def list_projects_for_member(self, user_id: str) -> list[ProjectRecord]:
        with translate_errors("list_projects_for_member"):
            cursor = self.projects.find({"memberUserIds": to_object_id(user_id)})
            documents = await cursor.to_list(None)
        return [ProjectRecord.from_document(document) for document in documents]

    async def update_project_title(self, project_id: str, title: str) -> ProjectRecord | None:
        with translate_errors("update_project_title"):
            document = await self.projects.find_one_and_update(
                {"_id": to_object_id(project_id)},
                {"$set": {"title": title}},
                return_document=ReturnDocument.AFTER,
            )
        return ProjectRecord.from_document(document) if document else None

    async def delete_project(self, project_id: str) -> None:
        with translate_errors("delete_project"):
            await self.projects.delete_one({"_id": to_object_id(project_id)})

    async def add_project_member(self, project_id: str, user_id: str) -> ProjectRecord | None:
        with translate_errors("add_project_member"):
            document = await self.projects.find_one_and_update(
                {"_id": to_object_id(project_id)},
                {"$addToSet": {"memberUserIds": to_object_id(user_id)}},
                return_document=ReturnDocument.AFTER,
            )
        return ProjectRecord.from_document(document) if document else None

    # ToDos

    async def insert_todo(
        self, *, content: str, project_id: str, is_completed: bool = False
    ) -> ToDoRecord:
        document: dict[str, Any] = {
            "content": content,
            "isCompleted": is_completed,
            "projectId": to_object_id(project_id),
        }
        with translate_errors("insert_todo"):
            result = await self.todos.insert_one(document)
        document["_id"] = result.inserted_id
        return ToDoRecord.from_document(document)

    async def get_todo(self, todo_id: str) -> ToDoRecord | None:
        with translate_errors("get_todo"):
            document = await self.todos.find_one({"_id": to_object_id(todo_id)})
        return ToDoRecord.from_document(document) if document else None

    async def list_todos_for_project(self, project_id: str) -> list[ToDoRecord]:
        with translate_errors("list_todos_for_project"):
            cursor = self.todos.find({"projectId": to_object_id(project_id)})
            documents = await cursor.to_list(None)
        return [ToDoRecord.from_document(document) for document in documents]

    async def update_todo(self, todo_id: str, changes: ToDoChanges) -> ToDoRecord | None:
        if changes.is_empty():
            return await self.get_todo(todo_id)

        with translate_errors("update_todo"):
            document = await self.todos.find_one_and_update(
                {"_id": to_object_id(todo_id)},
                {"$set": changes.to_update()},
                return_document=ReturnDocument.AFTER,
            )
        return ToDoRecord.from_document(document) if document else None

    async def delete_todo(self, todo_id: str) -> None:
        with translate_errors("delete_todo"):
            await self.todos.delete_one({"_id": to_object_id(todo_id)})

    # Maintenance

    async def ensure_indexes(self) -> None:
        with translate_errors("ensure_indexes"):
            await self.users.create_index([("email", ASCENDING)])
            await self.projects.create_index([("memberUserIds", ASCENDING)])
            await self.todos.create_index([("projectId", ASCENDING)])
        logger.info(
            "Indexes ensured",
            collections=[USERS_COLLECTION, PROJECTS_COLLECTION, TODOS_COLLECTION],
        )

    async def ping(self) -> None:
        with translate_errors("ping"):
            await self.database.command("ping")
