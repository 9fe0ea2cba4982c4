"""
Database - Learning Store I/O Operations

Loads and saves per-profile learning stores.
Uses SQLAlchemy ORM; SQLite by default, any SQLAlchemy URL via DATABASE_URL.

This module handles ONLY database I/O.
Algorithm logic is handled by the scheduler package.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from vocab_core.scheduler import (
    LearningStore,
    is_legacy_blob,
    load_learning_store,
    migrate_legacy_weights,
    process_answer,
)
from vocab_core.storage.models import Base, LearningStoreRow

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///logs/learning_store.db"
PROD_DB_NAME = "learning_store"
TEST_DB_NAME = "test_learning_store"

# Engine is created once and reused across sessions
_engine: Optional[Engine] = None


# ---- Configuration ----

def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_default_profile_id() -> str:
    """Profile used when the caller does not name one."""
    return os.getenv("DEFAULT_PROFILE_ID", "guest")


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    DATABASE_URL may be any SQLAlchemy URL; it defaults to a SQLite file
    under logs/. In test mode, 'learning_store' in the URL is replaced
    with 'test_learning_store'.

    Returns:
        Database URL
    """
    base_url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL

    if is_test_mode() and TEST_DB_NAME not in base_url:
        return base_url.replace(PROD_DB_NAME, TEST_DB_NAME)

    return base_url


def get_engine() -> Engine:
    """
    Get (or create) the SQLAlchemy engine.

    SQLite files get their parent directory created on demand; other
    backends use a small connection pool.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine

    if _engine is not None:
        return _engine

    db_url = get_database_url()
    url = make_url(db_url)

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        _engine = create_engine(db_url, echo=False)
    else:
        _engine = create_engine(
            db_url,
            pool_size=5,           # Keep 5 connections open
            max_overflow=10,       # Allow up to 10 extra connections
            pool_pre_ping=True,    # Verify connections before use
            echo=False
        )

    return _engine


def dispose_engine():
    """Close pooled connections and forget the cached engine."""
    global _engine

    if _engine is not None:
        _engine.dispose()
        _engine = None


def get_session() -> Session:
    """
    Get a SQLAlchemy session for database operations.

    Returns:
        SQLAlchemy Session instance
    """
    SessionLocal = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return SessionLocal()


def init_db():
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times - only creates missing tables.
    """
    Base.metadata.create_all(get_engine())


def reset_db():
    """
    DANGEROUS: Delete all stores and recreate tables.

    Only use this for testing or when you want to start fresh.
    All learning progress for every profile will be lost!
    """
    engine = get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All learning store tables dropped")

    # Recreate tables
    init_db()


# ---- Store I/O ----

def _parse_payload(profile_id: str, payload: Optional[str]) -> Optional[Mapping[str, Any]]:
    """Decode a stored payload; anything unusable counts as no store."""
    if not payload:
        return None
    try:
        blob = json.loads(payload)
    except json.JSONDecodeError:
        logger.warning("Unparsable learning store for profile %r, starting fresh", profile_id)
        return None
    if not isinstance(blob, dict):
        logger.warning("Learning store for profile %r is not an object, starting fresh", profile_id)
        return None
    return blob


def load_raw_blob(profile_id: Optional[str] = None) -> Optional[Mapping[str, Any]]:
    """
    Load the stored blob for a profile as is (no migration).

    Returns:
        Parsed blob, or None if missing or unparsable
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    session = get_session()
    try:
        row = session.get(LearningStoreRow, profile_id)
        if row is None:
            return None
        return _parse_payload(profile_id, row.payload)
    finally:
        session.close()


def save_store(store: LearningStore, profile_id: Optional[str] = None):
    """
    Save a learning store (insert or replace).

    Args:
        store: Store to persist
        profile_id: Profile the store belongs to
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    _write_payload(profile_id, store.to_blob(), store.version)


def _write_payload(profile_id: str, blob: Mapping[str, Any], version: Optional[int]):
    session = get_session()
    try:
        row = session.get(LearningStoreRow, profile_id)
        payload = json.dumps(blob)
        now = datetime.now(timezone.utc)

        if row is None:
            session.add(
                LearningStoreRow(
                    profile_id=profile_id,
                    version=version,
                    payload=payload,
                    updated_at=now
                )
            )
        else:
            row.version = version
            row.payload = payload
            row.updated_at = now

        session.commit()
    finally:
        session.close()


def load_store(profile_id: Optional[str] = None) -> LearningStore:
    """
    Load a profile's learning store, migrating legacy data on the way.

    - Versioned blob: used as is
    - Legacy {word: weight} blob: migrated and saved back immediately
    - Missing or unparsable: empty store

    Args:
        profile_id: Profile to load (defaults to DEFAULT_PROFILE_ID)

    Returns:
        LearningStore
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    blob = load_raw_blob(profile_id)

    if is_legacy_blob(blob):
        store = load_learning_store(blob)
        save_store(store, profile_id)
        logger.info("Upgraded legacy store for profile %r (%d words)", profile_id, len(store))
        return store

    return load_learning_store(blob)


def record_answer(
    word: str,
    is_correct: bool,
    response_time_ms: float,
    profile_id: Optional[str] = None,
    now: Optional[int] = None
) -> Tuple[LearningStore, dict]:
    """
    Load, score one answer, and persist - the per-answer host step.

    Calls for the same profile must not overlap; there is no locking.

    Returns:
        Tuple of (saved_store, event_data_dict)
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    store = load_store(profile_id)
    store, event_data = process_answer(store, word, is_correct, response_time_ms, now)
    save_store(store, profile_id)
    return store, event_data


def import_legacy_weights(
    weights: Mapping[str, Any],
    profile_id: Optional[str] = None
) -> LearningStore:
    """
    Replace a profile's store with one migrated from a legacy weight map.

    Returns:
        The saved store
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    store = LearningStore.from_blob(migrate_legacy_weights(weights))
    save_store(store, profile_id)
    return store


def reset_store(profile_id: Optional[str] = None) -> LearningStore:
    """
    Replace a profile's store with an empty one.

    Returns:
        The saved (empty) store
    """
    if profile_id is None:
        profile_id = get_default_profile_id()

    store = LearningStore.empty()
    save_store(store, profile_id)
    logger.info("Reset learning store for profile %r", profile_id)
    return store
