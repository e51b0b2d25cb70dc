"""
Per-request GraphQL context
"""

from typing import Any

from fastapi import HTTPException, Request

from ..auth.middleware import extract_token, resolve_caller
from ..errors import InvalidToken
from ..logging import bind_user_id, get_logger

logger = get_logger(__name__)


async def build_context(request: Request) -> dict[str, Any]:
    """
    Build the context handed to every resolver of one request.

    The store handle and token service come from application state; the
    caller is resolved from the Authorization header. An absent token or a
    user that no longer exists yields ``user=None``. An invalid token fails
    the whole request with 401.
    """
    store = request.app.state.store
    tokens = request.app.state.tokens

    token = extract_token(request.headers.get("authorization"))

    try:
        user = await resolve_caller(token, store, tokens)
    except InvalidToken as e:
        logger.warning("Rejected request with invalid token", path=request.url.path)
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    bind_user_id(user.id if user else None)

    return {
        "request": request,
        "store": store,
        "tokens": tokens,
        "user": user,
    }
