"""
Error taxonomy surfaced through the GraphQL API.

Every error carries an ``extensions`` mapping; graphql-core copies it onto the
GraphQL error so clients can branch on ``extensions.code`` instead of the
message text.
"""

from __future__ import annotations


class TaskboardError(Exception):
    """Base class for errors raised by resolvers and the auth helper."""

    code = "INTERNAL_SERVER_ERROR"
    default_message = "Operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.extensions = {"code": self.code}


class Unauthenticated(TaskboardError):
    """Raised when an operation needs a caller and none was resolved."""

    code = "UNAUTHENTICATED"
    default_message = "Authentication error. Please sign in!"


class InvalidCredentials(TaskboardError):
    """Raised at sign-in when no user has the given email."""

    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class InvalidPassword(TaskboardError):
    """Raised at sign-in when the password does not match the stored hash."""

    code = "INVALID_PASSWORD"
    default_message = "Password invalid"


class InvalidToken(TaskboardError):
    """Raised when a session token is malformed, expired or mis-signed."""

    code = "INVALID_TOKEN"
    default_message = "Invalid token"


class InvalidIdentifier(TaskboardError, ValueError):
    """Raised when an id string is not a valid document identifier."""

    code = "BAD_USER_INPUT"
    default_message = "Invalid id"


class ProjectNotFound(TaskboardError):
    """Raised when a to-do refers to a project that no longer exists."""

    code = "NOT_FOUND"
    default_message = "Project not found"


class StoreError(TaskboardError):
    """Opaque failure reported by the document store."""

    code = "STORE_ERROR"
    default_message = "Database operation failed"
