"""
Identity reconciliation for clients and trainers.

Every client or trainer profile has a paired login credential. The profile
keeps a denormalized copy of the username and password hash, and a username
must be unique across credentials, clients and trainers together. The
reconciler creates and updates both records in lockstep.

Writes go through the stores in sequence; atomicity comes from the caller's
unit of work, not from the reconciler itself.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from fitclub.db.models import Client, Credential, Role, Trainer
from fitclub.domain.drafts import ClientDraft, PersonDraft, TrainerDraft
from fitclub.domain.errors import NotFoundError, UsernameTakenError, ValidationError
from fitclub.domain.passwords import Plaintext, classify_password, password_text
from fitclub.domain.validation import validate_client, validate_trainer
from fitclub.repositories.protocols import ClientStore, CredentialStore, PasswordEncoder, TrainerStore
from fitclub.services.assignment import TrainerAssigner

logger = logging.getLogger(__name__)

Profile = Union[Client, Trainer]


class IdentityReconciler:
    """Keeps Credential, Client and Trainer records consistent."""

    def __init__(
        self,
        credentials: CredentialStore,
        clients: ClientStore,
        trainers: TrainerStore,
        encoder: PasswordEncoder,
    ) -> None:
        self.credentials = credentials
        self.clients = clients
        self.trainers = trainers
        self.encoder = encoder
        self.assigner = TrainerAssigner(trainers)

    # -------------------------------------- helpers --------------------------------------
    def username_taken(self, username: str) -> bool:
        """True when any credential, client or trainer already uses ``username``."""
        return (
            self.credentials.find_by_username(username) is not None
            or self.clients.find_by_username(username) is not None
            or self.trainers.find_by_username(username) is not None
        )

    def _is_client(self, draft: PersonDraft) -> bool:
        if isinstance(draft, ClientDraft):
            return True
        if isinstance(draft, TrainerDraft):
            return False
        raise TypeError(f"Unsupported profile draft: {type(draft).__name__}")

    def _validate(self, draft: PersonDraft, is_new: bool) -> None:
        if self._is_client(draft):
            validate_client(draft, is_new)
        else:
            validate_trainer(draft, is_new)

    def _check_role(self, draft: PersonDraft, role: Role) -> None:
        allowed = (Role.CLIENT, Role.ADMIN) if self._is_client(draft) else (Role.TRAINER,)
        if role not in allowed:
            raise ValidationError(f"Роль {role.value} не подходит для этого профиля.")

    def _resolve_trainer_for(self, draft: PersonDraft, trainer_id: Optional[int]) -> Optional[Trainer]:
        if not self._is_client(draft):
            if trainer_id is not None:
                raise ValidationError("Тренера можно назначить только клиенту.")
            return None
        return self.assigner.resolve_trainer(trainer_id)

    # -------------------------------------- create --------------------------------------
    def create_identity(self, draft: PersonDraft, role: Role, trainer_id: Optional[int] = None) -> Profile:
        """
        Create a profile and its credential.

        Raises ValidationError, UsernameTakenError or ReferenceNotFoundError.
        The password is always treated as plaintext here, whatever it looks like.
        """
        self._validate(draft, is_new=True)
        self._check_role(draft, role)
        if self.username_taken(draft.username):
            raise UsernameTakenError(draft.username)
        trainer = self._resolve_trainer_for(draft, trainer_id)

        plaintext = password_text(draft.password)
        credential = Credential(username=draft.username, password_hash=self.encoder.hash(plaintext), role=role)
        self.credentials.save(credential)

        if self._is_client(draft):
            profile = Client(
                name=draft.name,
                phone=draft.phone,
                username=draft.username,
                subscription_id=draft.subscription_id,
                trainer=trainer,
            )
            store = self.clients
        else:
            profile = Trainer(name=draft.name, username=draft.username)
            store = self.trainers
        # Hashed separately from the credential copy; both verify against the same plaintext.
        profile.password_hash = self.encoder.hash(plaintext)
        saved = store.save(profile)
        logger.info("Created %s identity %r (profile id=%s)", role.value, saved.username, saved.id)
        return saved

    # -------------------------------------- update --------------------------------------
    def update_identity(
        self,
        profile_id: int,
        draft: PersonDraft,
        role: Role,
        trainer_id: Optional[int] = None,
    ) -> Profile:
        """
        Apply ``draft`` to an existing profile and keep its credential in sync.

        A password value carrying the encoder prefix is taken as already hashed
        and left alone; an empty one keeps the current hash. For clients a
        missing ``trainer_id`` clears the trainer assignment.
        """
        is_client = self._is_client(draft)
        store = self.clients if is_client else self.trainers
        existing = store.find_by_id(profile_id)
        if existing is None:
            raise NotFoundError(profile_id, kind="Клиент" if is_client else "Тренер")

        self._validate(draft, is_new=False)
        self._check_role(draft, role)
        password = classify_password(draft.password, self.encoder.is_hashed)
        plaintext = password.value if isinstance(password, Plaintext) else None

        old_username = existing.username
        username_changed = draft.username != old_username
        if username_changed and self.username_taken(draft.username):
            raise UsernameTakenError(draft.username)
        trainer = self._resolve_trainer_for(draft, trainer_id)

        if username_changed or plaintext is not None:
            self._sync_credential(old_username, draft.username, plaintext)

        existing.name = draft.name
        existing.username = draft.username
        if plaintext is not None:
            existing.password_hash = self.encoder.hash(plaintext)
        if is_client:
            existing.trainer = trainer
            existing.phone = draft.phone
            existing.subscription_id = draft.subscription_id

        saved = store.save(existing)
        logger.info("Updated %s identity id=%s (%r -> %r)", role.value, saved.id, old_username, saved.username)
        return saved

    def _sync_credential(self, old_username: str, new_username: str, plaintext: Optional[str]) -> None:
        credential = self.credentials.find_by_username(old_username)
        if credential is None:
            # Best effort: the profile update still goes through.
            logger.warning("No credential paired with username %r; profile and credential have drifted", old_username)
            return
        credential.username = new_username
        if plaintext is not None:
            credential.password_hash = self.encoder.hash(plaintext)
        self.credentials.save(credential)
