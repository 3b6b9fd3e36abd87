"""Club-wide counters."""

from __future__ import annotations

from dataclasses import dataclass

from fitclub.repositories.sql_repository import unit_of_work


@dataclass
class ClubStatistics:
    total_clients: int
    total_subscriptions: int
    average_subscription_cost: float


def get_statistics() -> ClubStatistics:
    with unit_of_work() as stores:
        return ClubStatistics(
            total_clients=stores.clients.count(),
            total_subscriptions=stores.subscriptions.count(),
            average_subscription_cost=stores.subscriptions.average_cost(),
        )
