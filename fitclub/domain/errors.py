"""Errors raised by the membership use cases."""

from __future__ import annotations


class FitclubError(Exception):
    """Base class for membership domain errors."""


class ValidationError(FitclubError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsernameTakenError(FitclubError):
    """Raised when a username already exists in any identity namespace."""

    def __init__(self, username: str):
        super().__init__("Имя пользователя уже занято.")
        self.username = username


class NotFoundError(FitclubError):
    """Raised when the target of an update or lookup does not exist."""

    def __init__(self, entity_id: int, kind: str = "Запись"):
        super().__init__(f"{kind} с ID {entity_id} не найден.")
        self.id = entity_id
        self.kind = kind


class ReferenceNotFoundError(FitclubError):
    """Raised when a profile points at a trainer that does not exist."""

    def __init__(self, entity_id: int, kind: str = "Тренер"):
        super().__init__(f"{kind} с ID {entity_id} не найден.")
        self.id = entity_id
        self.kind = kind


class ConflictError(FitclubError):
    """Raised when the store rejects a write because of a uniqueness constraint."""
