from __future__ import annotations

from typing import List, Optional, Protocol, TypeVar

from fitclub.db.models import Client, Credential, Subscription, Trainer

T = TypeVar("T")


class Store(Protocol[T]):
    """
    Primitive operations every store offers.

    Implementations hide SQL/driver details; ``save`` returns the persisted
    record with its identifier assigned.
    """

    def find_by_id(self, entity_id: int) -> Optional[T]:
        ...

    def find_all(self) -> List[T]:
        ...

    def save(self, entity: T) -> T:
        ...

    def exists_by_id(self, entity_id: int) -> bool:
        ...

    def delete_by_id(self, entity_id: int) -> None:
        ...

    def count(self) -> int:
        ...


class CredentialStore(Store[Credential], Protocol):
    def find_by_username(self, username: str) -> Optional[Credential]:
        ...


class ClientStore(Store[Client], Protocol):
    def find_by_username(self, username: str) -> Optional[Client]:
        ...


class TrainerStore(Store[Trainer], Protocol):
    def find_by_username(self, username: str) -> Optional[Trainer]:
        ...


class SubscriptionStore(Store[Subscription], Protocol):
    def average_cost(self) -> float:
        """Mean cost over all subscriptions, 0.0 when there are none."""

        ...


class PasswordEncoder(Protocol):
    """
    One-way adaptive hasher shared by all use cases.

    ``is_hashed`` recognises values produced by ``hash`` through their fixed
    prefix.
    """

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, stored_hash: Optional[str]) -> bool:
        ...

    def is_hashed(self, value: Optional[str]) -> bool:
        ...
