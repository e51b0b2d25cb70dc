from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...auth.passwords import hash_password_async, verify_password_async
from ...errors import InvalidCredentials, InvalidPassword
from ...logging import get_logger
from ..access_control import get_store, get_token_service

if TYPE_CHECKING:
    from ..mutations.root import SignInInput, SignUpInput
    from ..types.auth import AuthUser

logger = get_logger(__name__)


async def sign_up(info: strawberry.Info, input: SignUpInput) -> AuthUser:
    """
    Register a new user and sign them in.

    Email addresses are not checked for uniqueness.
    """
    store = get_store(info)
    tokens = get_token_service(info)

    password_hash = await hash_password_async(input.password)
    user = await store.insert_user(
        name=input.name,
        email=input.email,
        password_hash=password_hash,
        avatar=input.avatar,
    )

    logger.info("User signed up", user_id=user.id)

    from ..types.auth import AuthUser
    from ..types.user import User

    return AuthUser(user=User.from_record(user), token=tokens.issue_token(user.id))


async def sign_in(info: strawberry.Info, input: SignInInput) -> AuthUser:
    """Exchange an email and password for a session token."""
    store = get_store(info)
    tokens = get_token_service(info)

    user = await store.find_user_by_email(input.email)
    if not user:
        logger.info("Sign-in for unknown email")
        raise InvalidCredentials()

    if not await verify_password_async(input.password, user.password_hash):
        logger.info("Sign-in with wrong password", user_id=user.id)
        raise InvalidPassword()

    logger.info("User signed in", user_id=user.id)

    from ..types.auth import AuthUser
    from ..types.user import User

    return AuthUser(user=User.from_record(user), token=tokens.issue_token(user.id))
