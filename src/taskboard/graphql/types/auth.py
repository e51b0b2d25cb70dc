"""
Authentication payload type definitions
"""

import strawberry

from .user import User


@strawberry.type
class AuthUser:
    """Returned by sign-up and sign-in: the user and a fresh session token."""

    user: User
    token: str
