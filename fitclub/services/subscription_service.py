"""Subscription plan use cases."""

from __future__ import annotations

from typing import Optional

from fitclub.db.models import Subscription
from fitclub.domain.drafts import SubscriptionDraft
from fitclub.domain.validation import validate_subscription
from fitclub.repositories.sql_repository import unit_of_work
from fitclub.services.assignment import resolve_subscription


class SubscriptionService:
    """Validates and stores subscription plans."""

    def create_subscription(self, draft: SubscriptionDraft) -> Subscription:
        validate_subscription(draft)
        with unit_of_work() as stores:
            entity = Subscription(plan_type=draft.plan_type, cost=draft.cost, duration_days=draft.duration_days)
            return stores.subscriptions.save(entity)

    def update_subscription(self, subscription_id: int, draft: SubscriptionDraft) -> Subscription:
        with unit_of_work() as stores:
            existing = resolve_subscription(stores.subscriptions, subscription_id)
            validate_subscription(draft)
            existing.plan_type = draft.plan_type
            existing.cost = draft.cost
            existing.duration_days = draft.duration_days
            return stores.subscriptions.save(existing)

    def get_subscription(self, subscription_id: int) -> Optional[Subscription]:
        with unit_of_work() as stores:
            return stores.subscriptions.find_by_id(subscription_id)

    def list_subscriptions(self) -> list[Subscription]:
        with unit_of_work() as stores:
            return stores.subscriptions.find_all()

    def delete_subscription(self, subscription_id: int) -> bool:
        """Clients on the deleted plan keep their profile with no subscription."""
        with unit_of_work() as stores:
            if not stores.subscriptions.exists_by_id(subscription_id):
                return False
            stores.subscriptions.delete_by_id(subscription_id)
            return True
