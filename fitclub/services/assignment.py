"""Resolve trainer and subscription references carried by profile drafts."""

from __future__ import annotations

from typing import Optional

from fitclub.db.models import Subscription, Trainer
from fitclub.domain.errors import NotFoundError, ReferenceNotFoundError
from fitclub.repositories.protocols import SubscriptionStore, TrainerStore


class TrainerAssigner:
    def __init__(self, trainers: TrainerStore) -> None:
        self.trainers = trainers

    def resolve_trainer(self, trainer_id: Optional[int]) -> Optional[Trainer]:
        """
        Return the trainer for ``trainer_id``.

        No id means "no trainer": the caller detaches any current assignment.
        """
        if trainer_id is None:
            return None
        trainer = self.trainers.find_by_id(trainer_id)
        if trainer is None:
            raise ReferenceNotFoundError(trainer_id, kind="Тренер")
        return trainer


def resolve_subscription(subscriptions: SubscriptionStore, subscription_id: int) -> Subscription:
    subscription = subscriptions.find_by_id(subscription_id)
    if subscription is None:
        raise NotFoundError(subscription_id, kind="Абонемент")
    return subscription
