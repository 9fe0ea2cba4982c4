"""
Tests for per-profile learning store persistence (SQLite).
"""

import json
from datetime import datetime, timezone

import pytest

from vocab_core.scheduler import LearningStore, WordLearningRecord
from vocab_core.storage import LearningStoreRow
from vocab_core.storage.database import get_session

from conftest import NOW


def write_raw_payload(profile_id, payload, version=None):
    session = get_session()
    try:
        session.add(
            LearningStoreRow(
                profile_id=profile_id,
                version=version,
                payload=payload,
                updated_at=datetime.now(timezone.utc)
            )
        )
        session.commit()
    finally:
        session.close()


class TestConfiguration:

    def test_test_mode_swaps_database_name(self, monkeypatch):
        from vocab_core.storage import get_database_url

        monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@localhost:5432/learning_store")
        monkeypatch.setenv("TEST_MODE", "true")
        assert get_database_url().endswith("/test_learning_store")

        monkeypatch.setenv("TEST_MODE", "false")
        assert get_database_url().endswith("/learning_store")

    def test_default_profile(self, monkeypatch):
        from vocab_core.storage import get_default_profile_id

        monkeypatch.delenv("DEFAULT_PROFILE_ID", raising=False)
        assert get_default_profile_id() == "guest"
        monkeypatch.setenv("DEFAULT_PROFILE_ID", "mia")
        assert get_default_profile_id() == "mia"


class TestLoadStore:

    def test_missing_profile_is_empty_store(self, store_db):
        store = store_db.load_store("nobody")
        assert store.version == 1
        assert len(store) == 0

    def test_save_and_load_round_trip(self, store_db):
        store = LearningStore(records={
            "cat": WordLearningRecord(word="cat", weight=0.6, interval=2.5, last_reviewed=NOW,
                                      review_count=1, correct_streak=1, avg_response_time=1000),
        })
        store_db.save_store(store, "mia")

        loaded = store_db.load_store("mia")
        assert dict(loaded.records) == dict(store.records)

    def test_profiles_are_separate(self, store_db):
        store_db.save_store(LearningStore(records={"cat": WordLearningRecord(word="cat")}), "mia")
        assert len(store_db.load_store("leo")) == 0

    def test_legacy_payload_migrated_and_saved(self, store_db):
        write_raw_payload("mia", json.dumps({"dog": 3, "cat": 0.8}))

        store = store_db.load_store("mia")

        assert store.get("dog").weight == 3
        assert store.get("dog").interval == 1
        assert store.get("cat").interval == 3
        assert store_db.load_raw_blob("mia")["version"] == 1

    def test_unparsable_payload_starts_fresh(self, store_db):
        write_raw_payload("mia", "{not json")
        store = store_db.load_store("mia")
        assert len(store) == 0

    def test_non_object_payload_starts_fresh(self, store_db):
        write_raw_payload("mia", json.dumps([1, 2, 3]))
        assert len(store_db.load_store("mia")) == 0


class TestWrites:

    def test_record_answer_persists(self, store_db):
        store, event = store_db.record_answer("cat", True, 1000, profile_id="mia", now=NOW)
        assert event["is_new_word"] is True

        store, event = store_db.record_answer("cat", True, 1000, profile_id="mia", now=NOW + 1)
        assert event["is_new_word"] is False

        loaded = store_db.load_store("mia")
        assert loaded.get("cat").review_count == 2
        assert loaded.get("cat").weight == pytest.approx(0.5)

    def test_default_profile_used(self, store_db):
        store_db.record_answer("cat", False, 1000, now=NOW)
        assert "cat" in store_db.load_store("guest")

    def test_import_legacy_weights_replaces_store(self, store_db):
        store_db.save_store(LearningStore(records={"owl": WordLearningRecord(word="owl")}), "mia")

        store = store_db.import_legacy_weights({"dog": 3}, profile_id="mia")

        assert store.words() == ["dog"]
        assert store_db.load_store("mia").words() == ["dog"]

    def test_reset_store(self, store_db):
        store_db.record_answer("cat", True, 1000, profile_id="mia", now=NOW)

        store_db.reset_store("mia")

        assert len(store_db.load_store("mia")) == 0
        assert store_db.load_raw_blob("mia") == {"version": 1}

    def test_reset_db_drops_everything(self, store_db):
        store_db.record_answer("cat", True, 1000, profile_id="mia", now=NOW)
        store_db.reset_db()
        assert store_db.load_raw_blob("mia") is None


class TestImportScript:

    def run_script(self, monkeypatch, *argv):
        from scripts.data import import_legacy_weights

        monkeypatch.setattr("sys.argv", ["import_legacy_weights", *argv])
        import_legacy_weights.main()

    def test_imports_weights_into_profile(self, store_db, tmp_path, monkeypatch):
        path = tmp_path / "word_weights.json"
        path.write_text(json.dumps({"dog": 3, "cat": 0.8}), encoding="utf-8")

        self.run_script(monkeypatch, str(path), "--profile", "mia")

        loaded = store_db.load_store("mia")
        assert sorted(loaded.words()) == ["cat", "dog"]
        assert loaded.get("dog").interval == 1
        assert loaded.get("cat").interval == 3

    def test_dry_run_writes_nothing(self, store_db, tmp_path, monkeypatch):
        path = tmp_path / "word_weights.json"
        path.write_text(json.dumps({"dog": 3}), encoding="utf-8")

        self.run_script(monkeypatch, str(path), "--profile", "mia", "--dry-run")

        assert store_db.load_raw_blob("mia") is None
