"""Authentication for Taskboard: password hashing, session tokens, caller resolution."""

from .factory import get_token_service
from .middleware import extract_token, resolve_caller
from .passwords import hash_password, verify_password
from .tokens import TokenService

__all__ = [
    "TokenService",
    "extract_token",
    "get_token_service",
    "hash_password",
    "resolve_caller",
    "verify_password",
]
