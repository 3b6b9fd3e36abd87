"""Security helpers (hashing and verification)."""

from __future__ import annotations

from functools import lru_cache

from argon2 import PasswordHasher, exceptions as argon_exc

from .config import get_settings

HASH_PREFIX = "argon2$"


class Argon2PasswordEncoder:
    """
    Argon2 hasher whose output carries a fixed prefix.

    The prefix is what ``is_hashed`` looks for when deciding whether a
    submitted password is an already encoded value or new plaintext.
    """

    prefix = HASH_PREFIX

    def __init__(self, time_cost: int = 3, memory_cost: int = 65536, parallelism: int = 4) -> None:
        self._ph = PasswordHasher(time_cost=time_cost, memory_cost=memory_cost, parallelism=parallelism)

    def hash(self, password: str) -> str:
        """Create a modern Argon2 hash with a prefix for detection."""
        return f"{HASH_PREFIX}{self._ph.hash(password)}"

    def verify(self, password: str, stored_hash: str | None) -> bool:
        stored = stored_hash or ""
        if not stored.startswith(HASH_PREFIX):
            return False
        hashed = stored[len(HASH_PREFIX) :]
        try:
            return self._ph.verify(hashed, password)
        except (argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False

    def is_hashed(self, value: str | None) -> bool:
        return bool(value) and value.startswith(HASH_PREFIX)


@lru_cache
def get_password_encoder() -> Argon2PasswordEncoder:
    """Build the shared encoder from settings."""
    settings = get_settings()
    return Argon2PasswordEncoder(
        time_cost=max(1, settings.argon2_time_cost),
        memory_cost=settings.argon2_memory_cost,
        parallelism=max(1, settings.argon2_parallelism),
    )
