"""
Tagged password values.

Callers can say explicitly whether the password slot holds new plaintext, a
value that is already encoded, or nothing to change. Raw strings are still
accepted and mapped through ``classify_password``: anything carrying the
encoder prefix counts as already hashed, so a plaintext that happens to start
with that prefix is never re-hashed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union


@dataclass(frozen=True)
class Plaintext:
    value: str


@dataclass(frozen=True)
class AlreadyHashed:
    value: str


class Unchanged:
    _instance: Optional["Unchanged"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = Unchanged()

PasswordInput = Union[Plaintext, AlreadyHashed, Unchanged]


def classify_password(value, is_hashed: Callable[[str], bool]) -> PasswordInput:
    """Map a raw draft value (or an already tagged one) to a PasswordInput."""
    if isinstance(value, (Plaintext, AlreadyHashed, Unchanged)):
        return value
    if not value:
        return UNCHANGED
    if is_hashed(value):
        return AlreadyHashed(value)
    return Plaintext(value)


def password_text(value) -> str:
    """Return the textual content of a draft password, '' when there is none."""
    if isinstance(value, (Plaintext, AlreadyHashed)):
        return value.value
    if isinstance(value, Unchanged) or value is None:
        return ""
    return str(value)
