"""
Learning State - Per-Word Records and the Learning Store

Defines the state the scheduler reads and writes:
- WordLearningRecord: one record per vocabulary item ever scored
- LearningStore: word -> record mapping plus a schema version tag

Both are immutable values. Updates produce new instances so the
host decides when (and whether) to persist them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional

from vocab_core.scheduler.constants import (
    DEFAULT_EASE_FACTOR,
    DEFAULT_INTERVAL,
    DEFAULT_WEIGHT,
    MAX_EASE_FACTOR,
    MAX_INTERVAL,
    MAX_WEIGHT,
    MIN_EASE_FACTOR,
    MIN_INTERVAL,
    MIN_WEIGHT,
    STORE_VERSION,
    VERSION_KEY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordLearningRecord:
    """
    Learning state for a single word.

    weight is an inverse mastery signal: lower means better known,
    higher means more urgent to review.
    """
    word: str
    weight: float = DEFAULT_WEIGHT            # 0.5 - 8.0
    interval: float = DEFAULT_INTERVAL        # Days until next expected review (1 - 365)
    ease_factor: float = DEFAULT_EASE_FACTOR  # 1.3 - 2.5, tracked only
    last_reviewed: Optional[int] = None       # Epoch milliseconds, None = never reviewed
    review_count: int = 0
    correct_streak: int = 0
    avg_response_time: float = 0              # Rolling average in ms

    def __post_init__(self):
        # Bounds hold for every record, however it was built
        object.__setattr__(self, "weight", clamp(self.weight, MIN_WEIGHT, MAX_WEIGHT))
        object.__setattr__(self, "interval", clamp(self.interval, MIN_INTERVAL, MAX_INTERVAL))
        object.__setattr__(self, "ease_factor", clamp(self.ease_factor, MIN_EASE_FACTOR, MAX_EASE_FACTOR))
        if self.avg_response_time < 0:
            object.__setattr__(self, "avg_response_time", 0)

    @property
    def is_new(self) -> bool:
        return self.review_count == 0


def create_default_learning(word: str) -> WordLearningRecord:
    """Create the default learning record for a word never scored before."""
    return WordLearningRecord(word=word)


def now_ms() -> int:
    """Current UTC time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round like JavaScript Math.round (halves go up, not to even)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class LearningStore:
    """
    All learning records for one learner plus the schema version.

    The store is the unit of persistence. It is passed into every
    scheduler call and a new store is returned from every write.
    """
    version: int = STORE_VERSION
    records: Mapping[str, WordLearningRecord] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so callers cannot mutate a shared store
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, word: object) -> bool:
        return word in self.records

    def get(self, word: str) -> Optional[WordLearningRecord]:
        return self.records.get(word)

    def record_for(self, word: str) -> WordLearningRecord:
        """Stored record, or a default one that is not added to the store."""
        record = self.records.get(word)
        return record if record is not None else create_default_learning(word)

    def words(self) -> list[str]:
        return list(self.records.keys())

    def with_record(self, record: WordLearningRecord) -> LearningStore:
        """Return a new store with this record inserted or replaced."""
        records = dict(self.records)
        records[record.word] = record
        return replace(self, records=records)

    @classmethod
    def empty(cls) -> LearningStore:
        return cls(version=STORE_VERSION, records={})

    @classmethod
    def from_blob(cls, blob: Optional[Mapping[str, Any]]) -> LearningStore:
        """
        Build a store from a persisted blob ({"version": 1, word: {...}}).

        Missing or malformed record fields are defaulted field by field.
        Entries that are not objects are skipped.
        """
        from vocab_core.schemas import StoredWordRecord

        if not isinstance(blob, Mapping):
            return cls.empty()

        version = blob.get(VERSION_KEY, STORE_VERSION)
        if not isinstance(version, int) or isinstance(version, bool):
            version = STORE_VERSION

        records = {}
        for word, data in blob.items():
            if word == VERSION_KEY:
                continue
            if not isinstance(data, Mapping):
                logger.warning("Skipping store entry %r: expected an object, got %s",
                               word, type(data).__name__)
                continue
            records[word] = StoredWordRecord.from_blob_entry(word, data).to_record()

        return cls(version=version, records=records)

    def to_blob(self) -> dict[str, Any]:
        """Serialize to the persisted blob shape (camelCase record fields)."""
        from vocab_core.schemas import StoredWordRecord

        blob: dict[str, Any] = {VERSION_KEY: self.version}
        for word, record in self.records.items():
            blob[word] = StoredWordRecord.from_record(record).model_dump(by_alias=True)
        return blob
