"""Data access helpers backed by SQLAlchemy, one store per table."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fitclub.db.models import Client, Credential, Subscription, Trainer
from fitclub.db.session import session_scope
from fitclub.domain.errors import ConflictError

logger = logging.getLogger(__name__)


class SQLStore:
    """CRUD helpers over a single mapped class, bound to one session."""

    model: type

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, entity_id: int):
        if entity_id is None:
            return None
        return self.session.get(self.model, entity_id)

    def find_all(self) -> list:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.execute(stmt).unique().scalars().all())

    def save(self, entity):
        self.session.add(entity)
        self.session.flush()
        self.session.refresh(entity)
        return entity

    def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id).limit(1)
        return self.session.execute(stmt).first() is not None

    def delete_by_id(self, entity_id: int) -> None:
        entity = self.session.get(self.model, entity_id)
        if entity is not None:
            self.session.delete(entity)
            self.session.flush()

    def delete_all(self) -> None:
        self.session.execute(delete(self.model))

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return int(self.session.execute(stmt).scalar_one())


class _UsernameLookup:
    def find_by_username(self, username: str):
        if not username:
            return None
        stmt = select(self.model).where(self.model.username == username)
        return self.session.execute(stmt).unique().scalar_one_or_none()


# -------------------------- credentials --------------------------
class SQLCredentialStore(_UsernameLookup, SQLStore):
    model = Credential


# -------------------------- profiles --------------------------
class SQLClientStore(_UsernameLookup, SQLStore):
    model = Client


class SQLTrainerStore(_UsernameLookup, SQLStore):
    model = Trainer


# -------------------------- subscriptions --------------------------
class SQLSubscriptionStore(SQLStore):
    model = Subscription

    def average_cost(self) -> float:
        value = self.session.execute(select(func.avg(Subscription.cost))).scalar_one()
        return float(value) if value is not None else 0.0


@dataclass
class SQLStores:
    """All stores bound to the same session, so they share one transaction."""

    session: Session
    credentials: SQLCredentialStore
    clients: SQLClientStore
    trainers: SQLTrainerStore
    subscriptions: SQLSubscriptionStore

    @classmethod
    def bind(cls, session: Session) -> "SQLStores":
        return cls(
            session=session,
            credentials=SQLCredentialStore(session),
            clients=SQLClientStore(session),
            trainers=SQLTrainerStore(session),
            subscriptions=SQLSubscriptionStore(session),
        )


@contextmanager
def unit_of_work() -> Iterator[SQLStores]:
    """
    Run a use case inside one transaction.

    Constraint violations the use case did not anticipate (typically two
    concurrent requests claiming the same username) surface as
    ``ConflictError``; every other store failure propagates unchanged.
    """
    try:
        with session_scope() as session:
            yield SQLStores.bind(session)
    except IntegrityError as exc:
        logger.warning("Store rejected write: %s", exc.orig)
        raise ConflictError("Запись конфликтует с уже сохранёнными данными.") from exc
