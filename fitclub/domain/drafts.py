"""
Input records for create/update use cases.

A draft carries what the caller asked for; it is validated (and its name
normalized) in place before any store is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .passwords import PasswordInput

PasswordValue = Union[str, PasswordInput, None]


@dataclass
class PersonDraft:
    """Fields shared by every login-bearing profile."""

    name: Optional[str]
    username: Optional[str]
    password: PasswordValue = None


@dataclass
class TrainerDraft(PersonDraft):
    pass


@dataclass
class ClientDraft(PersonDraft):
    phone: Optional[str] = None
    subscription_id: Optional[int] = None


@dataclass
class SubscriptionDraft:
    plan_type: Optional[str]
    cost: float
    duration_days: int
