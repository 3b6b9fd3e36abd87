from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the fitclub package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fitclub.core import config as core_config  # noqa: E402
from fitclub.core import security as core_security  # noqa: E402
from fitclub.db import models  # noqa: E402
from fitclub.db import session as db_session  # noqa: E402
from fitclub.db.models import Subscription  # noqa: E402
from fitclub.repositories.sql_repository import unit_of_work  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    core_security.get_password_encoder.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database plus cheap argon2 parameters; caches are reset around each test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("ARGON2_TIME_COST", "1")
    monkeypatch.setenv("ARGON2_MEMORY_COST", "64")
    monkeypatch.setenv("ARGON2_PARALLELISM", "1")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def encoder(temp_db):
    return core_security.get_password_encoder()


@pytest.fixture()
def plans(temp_db):
    """Two subscription plans; returns their ids as (monthly, yearly)."""
    with unit_of_work() as stores:
        monthly = stores.subscriptions.save(Subscription(plan_type="Месячный", cost=5000.0, duration_days=30))
        yearly = stores.subscriptions.save(Subscription(plan_type="Годовой", cost=45000.0, duration_days=365))
        return monthly.id, yearly.id
