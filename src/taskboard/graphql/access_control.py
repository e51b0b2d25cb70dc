"""
Shared access control logic for GraphQL resolvers

The only authorization rule is "some user is signed in": membership of a
project is never checked for reads or writes.
"""

from typing import TYPE_CHECKING

import strawberry

from ..errors import Unauthenticated
from ..logging import get_logger

if TYPE_CHECKING:
    from ..auth.tokens import TokenService
    from ..database.models import UserRecord
    from ..database.store import DocumentStore

logger = get_logger(__name__)


def get_store(info: strawberry.Info) -> "DocumentStore":
    """Get the request's document store handle from the GraphQL context."""
    return info.context["store"]


def get_token_service(info: strawberry.Info) -> "TokenService":
    return info.context["tokens"]


def get_current_user(info: strawberry.Info) -> "UserRecord | None":
    """Get the caller resolved by the context builder, or None if anonymous."""
    return info.context.get("user")


def require_user(info: strawberry.Info, operation: str) -> "UserRecord":
    """
    Return the caller, failing the operation when nobody is signed in.

    Raises:
        Unauthenticated: If the request carried no (or a stale) session token
    """
    user = get_current_user(info)
    if user is None:
        logger.info("Unauthenticated access", operation=operation)
        raise Unauthenticated()
    return user
