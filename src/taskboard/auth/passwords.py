"""Salted one-way password hashing."""

import asyncio
from typing import Any

import bcrypt


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def _run_sync(func, *args) -> Any:
    """Run CPU-bound bcrypt work in the default thread pool."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


async def hash_password_async(password: str) -> str:
    return await _run_sync(hash_password, password)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await _run_sync(verify_password, password, password_hash)
