"""
Pydantic models for the persisted learning store.

The host persists the store as a JSON blob:

    {"version": 1, "cat": {"word": "cat", "weight": 0.6, "easeFactor": 2.5, ...}}

Record fields keep their camelCase keys on disk so stores written by
earlier versions of the app load unchanged.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

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
)
from vocab_core.scheduler.learning_state import WordLearningRecord, clamp


class StoredWordRecord(BaseModel):
    """
    One word's record as stored in the blob.

    Any field may be missing; missing or unusable values
    fall back to the defaults of a brand new word. Bounded fields are
    clamped on the way in.
    """
    model_config = ConfigDict(populate_by_name=True)

    word: str
    weight: float = Field(default=DEFAULT_WEIGHT)
    interval: float = Field(default=DEFAULT_INTERVAL)
    ease_factor: float = Field(default=DEFAULT_EASE_FACTOR, alias="easeFactor")
    last_reviewed: Optional[int] = Field(default=None, alias="lastReviewed")
    review_count: int = Field(default=0, alias="reviewCount")
    correct_streak: int = Field(default=0, alias="correctStreak")
    avg_response_time: float = Field(default=0, alias="avgResponseTime")

    @model_validator(mode="before")
    @classmethod
    def drop_unusable_values(cls, data: Any) -> Any:
        """Treat nulls, strings and non-finite numbers as missing so defaults apply."""
        if not isinstance(data, Mapping):
            return data
        cleaned = {}
        for key, value in data.items():
            if key == "word":
                if isinstance(value, str):
                    cleaned[key] = value
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            if not math.isfinite(value):
                continue
            cleaned[key] = value
        return cleaned

    @field_validator("weight")
    @classmethod
    def clamp_weight(cls, v: float) -> float:
        return clamp(v, MIN_WEIGHT, MAX_WEIGHT)

    @field_validator("interval")
    @classmethod
    def clamp_interval(cls, v: float) -> float:
        return clamp(v, MIN_INTERVAL, MAX_INTERVAL)

    @field_validator("ease_factor")
    @classmethod
    def clamp_ease_factor(cls, v: float) -> float:
        return clamp(v, MIN_EASE_FACTOR, MAX_EASE_FACTOR)

    @field_validator("review_count", "correct_streak", mode="before")
    @classmethod
    def whole_counts(cls, v: Any) -> Any:
        # Counters written by a JS host can arrive as 3.0
        if isinstance(v, (int, float)):
            return max(0, int(v))
        return v

    @field_validator("avg_response_time", mode="before")
    @classmethod
    def non_negative_latency(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return max(0, v)
        return v

    @field_validator("last_reviewed", mode="before")
    @classmethod
    def whole_milliseconds(cls, v: Any) -> Any:
        if isinstance(v, float):
            return int(v)
        return v

    @classmethod
    def from_blob_entry(cls, word: str, data: Mapping[str, Any]) -> StoredWordRecord:
        """Parse a blob entry; the store key is authoritative for the word."""
        return cls.model_validate({**data, "word": word})

    @classmethod
    def from_record(cls, record: WordLearningRecord) -> StoredWordRecord:
        return cls(
            word=record.word,
            weight=record.weight,
            interval=record.interval,
            ease_factor=record.ease_factor,
            last_reviewed=record.last_reviewed,
            review_count=record.review_count,
            correct_streak=record.correct_streak,
            avg_response_time=record.avg_response_time,
        )

    def to_record(self) -> WordLearningRecord:
        return WordLearningRecord(
            word=self.word,
            weight=self.weight,
            interval=self.interval,
            ease_factor=self.ease_factor,
            last_reviewed=self.last_reviewed,
            review_count=self.review_count,
            correct_streak=self.correct_streak,
            avg_response_time=self.avg_response_time,
        )
