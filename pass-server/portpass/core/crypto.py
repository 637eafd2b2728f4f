"""Utilities for password hashing and verification."""

from __future__ import annotations

import asyncio

import bcrypt

from .exceptions import ValidationFailureError

DEFAULT_ROUNDS = 10
# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash plain text password using bcrypt."""
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationFailureError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


class CredentialManager:
    """One-way password handling for staff accounts.

    bcrypt salts every hash and ``checkpw`` compares digests in constant time.
    The ``*_async`` variants push the CPU-bound work onto a worker thread so
    callers on the event loop are not stalled while a hash is computed.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        return hash_password(plaintext, self._rounds)

    def verify(self, plaintext: str, password_hash: str) -> bool:
        return verify_password(plaintext, password_hash)

    async def hash_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext, password_hash)


__all__ = ["CredentialManager", "DEFAULT_ROUNDS", "MAX_PASSWORD_BYTES", "hash_password", "verify_password"]
