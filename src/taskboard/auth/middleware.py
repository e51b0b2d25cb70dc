"""Resolve the calling user from a session token."""

from __future__ import annotations

from ..database.models import UserRecord
from ..database.store import DocumentStore
from ..errors import InvalidIdentifier, InvalidToken
from ..logging import get_logger
from .tokens import TokenService

logger = get_logger(__name__)


def extract_token(authorization: str | None) -> str | None:
    """
    Extract the token from an Authorization header value.

    Clients send either the raw token or ``Bearer <token>``; an absent or
    blank header means an anonymous request.
    """
    if not authorization:
        return None

    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer":
        value = rest.strip()

    return value or None


async def resolve_caller(
    token: str | None, store: DocumentStore, tokens: TokenService
) -> UserRecord | None:
    """
    Map a session token back to the user it was issued for.

    Returns None when no token is supplied, when the token carries no user
    id, or when that user no longer exists.

    Raises:
        InvalidToken: If the token is malformed, expired or mis-signed
    """
    if not token:
        return None

    user_id = tokens.user_id_from_token(token)
    if not user_id:
        logger.info("Token carries no user id")
        return None

    try:
        user = await store.get_user(user_id)
    except InvalidIdentifier as e:
        logger.warning("Token subject is not a valid user id")
        raise InvalidToken() from e

    if user is None:
        logger.info("Token refers to a user that no longer exists", subject=user_id)
    return user
