"""
Field validation for profile and subscription drafts.

Rules are checked in a fixed order and the first violation raises
``ValidationError``. The only side effect is normalizing ``name`` (and
``plan_type``) on the draft that was passed in.
"""
from __future__ import annotations

import math
import numbers
import re

from .drafts import ClientDraft, PersonDraft, SubscriptionDraft
from .errors import ValidationError
from .passwords import password_text

NAME_PATTERN = re.compile(r"[A-Za-zА-Яа-яЁё -]+")
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{3,20}")
PHONE_PATTERN = re.compile(r"\+7[0-9]{10}")
_WHITESPACE = re.compile(r"\s+")

NAME_MIN, NAME_MAX = 2, 50
PASSWORD_MIN = 6
PLAN_TYPE_MIN, PLAN_TYPE_MAX = 2, 50
MAX_DURATION_DAYS = 365


def normalize_name(value: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", value.strip())


def validate_person(draft: PersonDraft, is_new: bool, entity_label: str = "пользователя") -> None:
    """Check name, username and (on creation) password of any profile kind."""
    if draft.name is None or not draft.name.strip():
        raise ValidationError("Имя не может быть пустым.")
    cleaned = normalize_name(draft.name)
    if not NAME_MIN <= len(cleaned) <= NAME_MAX:
        raise ValidationError(f"Имя должно содержать от {NAME_MIN} до {NAME_MAX} символов.")
    if not NAME_PATTERN.fullmatch(cleaned):
        raise ValidationError("Имя может содержать только буквы, пробелы и дефисы.")
    draft.name = cleaned

    if draft.username is None or not draft.username.strip():
        raise ValidationError("Имя пользователя не может быть пустым.")
    if not USERNAME_PATTERN.fullmatch(draft.username):
        raise ValidationError("Имя пользователя должно содержать 3–20 символов (буквы, цифры, подчёркивание).")

    if is_new:
        password = password_text(draft.password)
        if not password.strip():
            raise ValidationError(f"Пароль не может быть пустым при создании {entity_label}.")
        if len(password) < PASSWORD_MIN:
            raise ValidationError(f"Пароль должен содержать минимум {PASSWORD_MIN} символов.")


def validate_client(draft: ClientDraft, is_new: bool) -> None:
    validate_person(draft, is_new, entity_label="клиента")
    if draft.phone is None or not PHONE_PATTERN.fullmatch(draft.phone):
        raise ValidationError("Номер телефона должен начинаться с +7 и содержать 10 цифр.")
    if draft.subscription_id is None:
        raise ValidationError("Абонемент должен быть выбран.")


def validate_trainer(draft: PersonDraft, is_new: bool) -> None:
    validate_person(draft, is_new, entity_label="тренера")


def validate_subscription(draft: SubscriptionDraft) -> None:
    if draft.plan_type is None or not draft.plan_type.strip():
        raise ValidationError("Тип абонемента не может быть пустым.")
    cleaned = draft.plan_type.strip()
    if not PLAN_TYPE_MIN <= len(cleaned) <= PLAN_TYPE_MAX:
        raise ValidationError(f"Тип абонемента должен содержать от {PLAN_TYPE_MIN} до {PLAN_TYPE_MAX} символов.")
    draft.plan_type = cleaned
    cost = draft.cost
    if isinstance(cost, bool) or not isinstance(cost, numbers.Real) or not math.isfinite(cost) or cost <= 0:
        raise ValidationError("Стоимость абонемента должна быть больше 0.")
    days = draft.duration_days
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise ValidationError("Длительность абонемента должна быть больше 0 дней.")
    if days > MAX_DURATION_DAYS:
        raise ValidationError(f"Длительность абонемента не может превышать {MAX_DURATION_DAYS} дней.")
