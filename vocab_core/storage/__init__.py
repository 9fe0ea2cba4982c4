"""
Persistence of per-profile learning stores (host side).

Quick start:
    from vocab_core import storage

    storage.init_db()
    store = storage.load_store("mia")
    store, event = storage.record_answer("cat", True, 1200, profile_id="mia")
"""

from vocab_core.storage.database import (
    init_db,
    reset_db,
    is_test_mode,
    get_database_url,
    get_default_profile_id,
    get_engine,
    dispose_engine,
    load_raw_blob,
    load_store,
    save_store,
    record_answer,
    import_legacy_weights,
    reset_store,
)
from vocab_core.storage.models import LearningStoreRow

__all__ = [
    "init_db",
    "reset_db",
    "is_test_mode",
    "get_database_url",
    "get_default_profile_id",
    "get_engine",
    "dispose_engine",
    "load_raw_blob",
    "load_store",
    "save_store",
    "record_answer",
    "import_legacy_weights",
    "reset_store",
    "LearningStoreRow",
]
