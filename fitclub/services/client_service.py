"""Client use cases."""

from __future__ import annotations

import logging
from typing import Optional

from fitclub.core.security import get_password_encoder
from fitclub.db.models import Client, Role
from fitclub.domain.drafts import ClientDraft
from fitclub.repositories.protocols import PasswordEncoder
from fitclub.repositories.sql_repository import SQLStores, unit_of_work
from fitclub.services.identity_service import IdentityReconciler

logger = logging.getLogger(__name__)


class ClientService:
    """Create, update, look up and delete club clients."""

    def __init__(self, encoder: PasswordEncoder | None = None) -> None:
        self.encoder = encoder or get_password_encoder()

    def _reconciler(self, stores: SQLStores) -> IdentityReconciler:
        return IdentityReconciler(stores.credentials, stores.clients, stores.trainers, self.encoder)

    def create_client(self, draft: ClientDraft, trainer_id: Optional[int] = None) -> Client:
        with unit_of_work() as stores:
            return self._reconciler(stores).create_identity(draft, Role.CLIENT, trainer_id)

    def update_client(self, client_id: int, draft: ClientDraft, trainer_id: Optional[int] = None) -> Client:
        with unit_of_work() as stores:
            return self._reconciler(stores).update_identity(client_id, draft, Role.CLIENT, trainer_id)

    def get_client(self, client_id: int) -> Optional[Client]:
        with unit_of_work() as stores:
            return stores.clients.find_by_id(client_id)

    def get_client_by_username(self, username: str) -> Optional[Client]:
        with unit_of_work() as stores:
            return stores.clients.find_by_username(username)

    def list_clients(self) -> list[Client]:
        with unit_of_work() as stores:
            return stores.clients.find_all()

    def count_clients(self) -> int:
        with unit_of_work() as stores:
            return stores.clients.count()

    def delete_client(self, client_id: int) -> bool:
        """Remove the client and its credential. Returns False when there was nothing to delete."""
        with unit_of_work() as stores:
            client = stores.clients.find_by_id(client_id)
            if client is None:
                return False
            credential = stores.credentials.find_by_username(client.username)
            stores.clients.delete_by_id(client_id)
            if credential is not None:
                stores.credentials.delete_by_id(credential.id)
            logger.info("Deleted client id=%s (%r)", client_id, client.username)
            return True
