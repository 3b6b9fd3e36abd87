"""Trainer use cases."""

from __future__ import annotations

import logging
from typing import Optional

from fitclub.core.security import get_password_encoder
from fitclub.db.models import Role, Trainer
from fitclub.domain.drafts import TrainerDraft
from fitclub.repositories.protocols import PasswordEncoder
from fitclub.repositories.sql_repository import unit_of_work
from fitclub.services.identity_service import IdentityReconciler

logger = logging.getLogger(__name__)


class TrainerService:
    def __init__(self, encoder: PasswordEncoder | None = None) -> None:
        self.encoder = encoder or get_password_encoder()

    def create_trainer(self, draft: TrainerDraft) -> Trainer:
        with unit_of_work() as stores:
            reconciler = IdentityReconciler(stores.credentials, stores.clients, stores.trainers, self.encoder)
            return reconciler.create_identity(draft, Role.TRAINER)

    def update_trainer(self, trainer_id: int, draft: TrainerDraft) -> Trainer:
        with unit_of_work() as stores:
            reconciler = IdentityReconciler(stores.credentials, stores.clients, stores.trainers, self.encoder)
            return reconciler.update_identity(trainer_id, draft, Role.TRAINER)

    def get_trainer(self, trainer_id: int) -> Optional[Trainer]:
        with unit_of_work() as stores:
            return stores.trainers.find_by_id(trainer_id)

    def get_trainer_by_username(self, username: str) -> Optional[Trainer]:
        with unit_of_work() as stores:
            return stores.trainers.find_by_username(username)

    def list_trainers(self) -> list[Trainer]:
        with unit_of_work() as stores:
            return stores.trainers.find_all()

    def delete_trainer(self, trainer_id: int) -> bool:
        """Remove the trainer and its credential; assigned clients keep no trainer."""
        with unit_of_work() as stores:
            trainer = stores.trainers.find_by_id(trainer_id)
            if trainer is None:
                return False
            credential = stores.credentials.find_by_username(trainer.username)
            stores.trainers.delete_by_id(trainer_id)
            if credential is not None:
                stores.credentials.delete_by_id(credential.id)
            logger.info("Deleted trainer id=%s (%r)", trainer_id, trainer.username)
            return True
