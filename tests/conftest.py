import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vocab_core.scheduler.constants import MS_PER_DAY


# 2023-11-14T22:13:20Z
NOW = 1_700_000_000_000


def days_ago(days: float) -> int:
    return int(NOW - days * MS_PER_DAY)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def store_db(tmp_path, monkeypatch):
    """Fresh SQLite learning store database per test."""
    from vocab_core import storage

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'learning_store.db'}")
    monkeypatch.setenv("TEST_MODE", "false")
    monkeypatch.delenv("DEFAULT_PROFILE_ID", raising=False)

    storage.dispose_engine()
    storage.init_db()
    yield storage
    storage.dispose_engine()
