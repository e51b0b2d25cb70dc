"""
Database module for Taskboard backend
"""

from .connection import close_client, create_client, create_store
from .models import ProjectRecord, ToDoChanges, ToDoRecord, UserRecord
from .store import DocumentStore

__all__ = [
    "DocumentStore",
    "ProjectRecord",
    "ToDoChanges",
    "ToDoRecord",
    "UserRecord",
    "close_client",
    "create_client",
    "create_store",
]
