"""
Migration - Legacy Weight Maps to Versioned Learning Stores

Early versions of the app persisted a bare {word: weight} map. This
module upgrades that shape to the versioned store blob. It is safe to
run on every load: anything that already carries a version is returned
untouched.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from vocab_core.scheduler.constants import (
    DEFAULT_EASE_FACTOR,
    LEGACY_EASY_INTERVAL,
    LEGACY_HARD_INTERVAL,
    MAX_WEIGHT,
    MIN_WEIGHT,
    STORE_VERSION,
    VERSION_KEY,
)
from vocab_core.scheduler.learning_state import LearningStore, WordLearningRecord, clamp

logger = logging.getLogger(__name__)


def is_legacy_blob(blob: Optional[Mapping[str, Any]]) -> bool:
    """A non-empty mapping without a version key."""
    return isinstance(blob, Mapping) and len(blob) > 0 and VERSION_KEY not in blob


def migrate_legacy_record(word: str, raw_weight: float) -> WordLearningRecord:
    """
    Build a full record from a legacy weight.

    Words the old system weighted above 1 were struggling, so they get a
    short interval. The weight itself is clamped into the current bounds.
    """
    interval = LEGACY_HARD_INTERVAL if raw_weight > 1 else LEGACY_EASY_INTERVAL
    return WordLearningRecord(
        word=word,
        weight=clamp(raw_weight, MIN_WEIGHT, MAX_WEIGHT),
        interval=interval,
        ease_factor=DEFAULT_EASE_FACTOR,
        last_reviewed=None,
        review_count=0,
        correct_streak=0,
        avg_response_time=0,
    )


def migrate_legacy_weights(old_store: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Upgrade a legacy {word: weight} map to a versioned store blob.

    - None / empty / not a mapping -> {"version": 1}
    - Already versioned -> returned unchanged
    - Otherwise one record per numeric entry; other entries are dropped

    Args:
        old_store: Persisted blob in either format

    Returns:
        Store blob carrying a version key
    """
    if not isinstance(old_store, Mapping) or len(old_store) == 0:
        return {VERSION_KEY: STORE_VERSION}

    if VERSION_KEY in old_store:
        return old_store

    records = {}
    for word, raw_weight in old_store.items():
        if (
            isinstance(raw_weight, bool)
            or not isinstance(raw_weight, (int, float))
            or not math.isfinite(raw_weight)
        ):
            logger.warning("Skipping legacy entry %r: weight %r is not a number", word, raw_weight)
            continue
        records[word] = migrate_legacy_record(word, raw_weight)

    store = LearningStore(version=STORE_VERSION, records=records)
    logger.info("Migrated %d legacy word weights to store version %d", len(store), STORE_VERSION)
    return store.to_blob()


def load_learning_store(blob: Optional[Mapping[str, Any]]) -> LearningStore:
    """Migrate if needed, then parse a persisted blob into a LearningStore."""
    return LearningStore.from_blob(migrate_legacy_weights(blob))
