"""
Stored document shapes.

MongoDB documents keep their identifier under ``_id`` as an ``ObjectId`` and
reference other documents by ``ObjectId`` as well. Records expose a single
canonical ``id`` string instead, so nothing above the store boundary ever sees
``_id`` or ``ObjectId``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify_id(value: Any) -> Any:
    return str(value) if value is not None else value


class Record(BaseModel):
    """Base for records built from raw store documents."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return _stringify_id(value)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Record":
        """Build a record from a raw document, mapping ``_id`` to ``id``."""
        data = dict(document)
        if "_id" in data:
            data["id"] = data.pop("_id")
        return cls.model_validate(data)


class UserRecord(Record):
    name: str
    email: str
    password_hash: str = Field(alias="passwordHash", repr=False)
    avatar: str | None = None


class ProjectRecord(Record):
    title: str
    created_at: datetime = Field(alias="createdAt")
    member_user_ids: list[str] = Field(alias="memberUserIds", default_factory=list)

    @field_validator("member_user_ids", mode="before")
    @classmethod
    def _coerce_member_ids(cls, value: Any) -> Any:
        if value is None:
            return []
        return [_stringify_id(member_id) for member_id in value]

    def has_member(self, user_id: str) -> bool:
        return str(user_id) in self.member_user_ids


class ToDoRecord(Record):
    content: str
    is_completed: bool = Field(alias="isCompleted", default=False)
    project_id: str = Field(alias="projectId")

    @field_validator("project_id", mode="before")
    @classmethod
    def _coerce_project_id(cls, value: Any) -> Any:
        return _stringify_id(value)


class ToDoChanges(BaseModel):
    """Partial update for a to-do; only fields that were supplied are written."""

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    is_completed: bool | None = Field(alias="isCompleted", default=None)

    def to_update(self) -> dict[str, Any]:
        """Return the stored field names and values to ``$set``."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_update()
