"""Demo data: two subscription plans, an administrator and two clients."""
from __future__ import annotations

import logging

from fitclub.core.security import get_password_encoder
from fitclub.db.models import Role, Subscription
from fitclub.domain.drafts import ClientDraft
from fitclub.repositories.protocols import PasswordEncoder
from fitclub.repositories.sql_repository import unit_of_work
from fitclub.services.identity_service import IdentityReconciler

logger = logging.getLogger(__name__)


def seed_demo_data(encoder: PasswordEncoder | None = None) -> None:
    """Wipe profiles, credentials and plans, then insert the demo records."""
    encoder = encoder or get_password_encoder()
    with unit_of_work() as stores:
        stores.clients.delete_all()
        stores.trainers.delete_all()
        stores.credentials.delete_all()
        stores.subscriptions.delete_all()

        monthly = stores.subscriptions.save(Subscription(plan_type="Месячный", cost=5000.00, duration_days=30))
        yearly = stores.subscriptions.save(Subscription(plan_type="Годовой", cost=45000.00, duration_days=365))

        reconciler = IdentityReconciler(stores.credentials, stores.clients, stores.trainers, encoder)
        people = [
            (ClientDraft("Админ Админов", "admin", "admin123", phone="+79999999999", subscription_id=monthly.id), Role.ADMIN),
            (ClientDraft("Иван Иванов", "ivan", "ivan123", phone="+79876543210", subscription_id=monthly.id), Role.CLIENT),
            (ClientDraft("Мария Петрова", "maria", "maria123", phone="+79991234567", subscription_id=yearly.id), Role.CLIENT),
        ]
        for draft, role in people:
            reconciler.create_identity(draft, role)
    logger.info("Demo data seeded")


if __name__ == "__main__":
    seed_demo_data()
    print("Demo data seeded.")
