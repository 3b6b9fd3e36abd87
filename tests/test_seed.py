from __future__ import annotations

from fitclub.db.models import Role
from fitclub.db.seed import seed_demo_data
from fitclub.domain.drafts import TrainerDraft
from fitclub.repositories.sql_repository import unit_of_work
from fitclub.services.statistics_service import get_statistics
from fitclub.services.trainer_service import TrainerService


def test_seed_loads_demo_identities(temp_db, encoder):
    TrainerService().create_trainer(TrainerDraft("Пётр Сидоров", "petr", "petr123"))

    seed_demo_data()

    with unit_of_work() as stores:
        admin = stores.credentials.find_by_username("admin")
        assert admin.role is Role.ADMIN
        assert encoder.verify("admin123", admin.password_hash)
        maria = stores.clients.find_by_username("maria")
        assert maria.subscription.plan_type == "Годовой"
        assert encoder.verify("maria123", maria.password_hash)
        assert stores.credentials.find_by_username("ivan").role is Role.CLIENT
        assert stores.trainers.find_by_username("petr") is None
        assert stores.credentials.find_by_username("petr") is None

    stats = get_statistics()
    assert stats.total_clients == 3
    assert stats.total_subscriptions == 2


def test_seed_is_repeatable(temp_db):
    seed_demo_data()
    seed_demo_data()
    assert get_statistics().total_clients == 3
