from __future__ import annotations

import pytest

from fitclub.domain.drafts import ClientDraft, SubscriptionDraft
from fitclub.domain.errors import NotFoundError, ValidationError
from fitclub.services.client_service import ClientService
from fitclub.services.statistics_service import get_statistics
from fitclub.services.subscription_service import SubscriptionService


def test_create_and_update_subscription(temp_db):
    service = SubscriptionService()
    plan = service.create_subscription(SubscriptionDraft(plan_type="  Месячный ", cost=5000, duration_days=30))
    assert plan.id is not None
    assert plan.plan_type == "Месячный"

    updated = service.update_subscription(plan.id, SubscriptionDraft(plan_type="Квартальный", cost=13500, duration_days=90))
    assert (updated.plan_type, updated.cost, updated.duration_days) == ("Квартальный", 13500, 90)
    assert service.get_subscription(plan.id).plan_type == "Квартальный"
    assert [p.id for p in service.list_subscriptions()] == [plan.id]


def test_update_missing_subscription(temp_db):
    with pytest.raises(NotFoundError) as exc:
        SubscriptionService().update_subscription(7, SubscriptionDraft(plan_type="Месячный", cost=1, duration_days=1))
    assert exc.value.id == 7
    assert "Абонемент с ID 7" in str(exc.value)


def test_invalid_subscription_is_not_saved(temp_db):
    service = SubscriptionService()
    with pytest.raises(ValidationError):
        service.create_subscription(SubscriptionDraft(plan_type="Вечный", cost=100, duration_days=400))
    assert service.list_subscriptions() == []


def test_invalid_update_leaves_plan_untouched(temp_db):
    service = SubscriptionService()
    plan = service.create_subscription(SubscriptionDraft(plan_type="Месячный", cost=5000, duration_days=30))
    with pytest.raises(ValidationError):
        service.update_subscription(plan.id, SubscriptionDraft(plan_type="Месячный", cost=-1, duration_days=30))
    assert service.get_subscription(plan.id).cost == 5000


def test_delete_subscription_keeps_clients(temp_db):
    service = SubscriptionService()
    plan = service.create_subscription(SubscriptionDraft(plan_type="Месячный", cost=5000, duration_days=30))
    client = ClientService().create_client(
        ClientDraft("Иван Иванов", "ivan", "ivan123", phone="+79876543210", subscription_id=plan.id)
    )

    assert service.delete_subscription(plan.id) is True
    assert service.delete_subscription(plan.id) is False
    remaining = ClientService().get_client(client.id)
    assert remaining is not None
    assert remaining.subscription_id is None


def test_statistics(temp_db):
    empty = get_statistics()
    assert (empty.total_clients, empty.total_subscriptions, empty.average_subscription_cost) == (0, 0, 0.0)

    service = SubscriptionService()
    monthly = service.create_subscription(SubscriptionDraft(plan_type="Месячный", cost=5000, duration_days=30))
    service.create_subscription(SubscriptionDraft(plan_type="Годовой", cost=45000, duration_days=365))
    ClientService().create_client(
        ClientDraft("Иван Иванов", "ivan", "ivan123", phone="+79876543210", subscription_id=monthly.id)
    )

    stats = get_statistics()
    assert stats.total_clients == 1
    assert stats.total_subscriptions == 2
    assert stats.average_subscription_cost == 25000.0


def test_non_finite_cost_is_a_validation_error(temp_db):
    service = SubscriptionService()
    with pytest.raises(ValidationError):
        service.create_subscription(SubscriptionDraft(plan_type="Месячный", cost=float("nan"), duration_days=30))
    with pytest.raises(ValidationError):
        service.create_subscription(SubscriptionDraft(plan_type="Месячный", cost=10, duration_days=30.5))
    assert service.list_subscriptions() == []
