"""
Password hashing helpers.

Hashes are salted and produced by passlib; verification runs through
passlib's constant-time comparison. Both operations are CPU-bound, so the
async wrappers push them onto a worker thread to keep the event loop free.
"""

import asyncio

from passlib.context import CryptContext

from utilities.config import config

pwd_context = CryptContext(schemes=[config.password_hash_scheme], deprecated="auto")


async def hash_password(password: str) -> str:
    """
    Hash a plain text password.

    Args:
        password: Plain text password

    Returns:
        Salted hash string, self-describing (scheme, rounds, salt, digest)
    """
    return await asyncio.to_thread(pwd_context.hash, password)


async def password_matched(password: str, hashed_password: str) -> bool:
    """
    Check a plain text password against a stored hash.

    Args:
        password: Plain text password provided by the caller
        hashed_password: Hash previously produced by hash_password

    Returns:
        True if the password matches, False otherwise
    """
    return await asyncio.to_thread(pwd_context.verify, password, hashed_password)
