"""
Constants for word status classification and report labels.
"""

from __future__ import annotations

from typing import Final, Literal

from vocab_core.scheduler.constants import (
    MASTERED_MAX_WEIGHT,
    MASTERED_MIN_STREAK,
    STRUGGLING_MIN_WEIGHT,
)


WordStatus = Literal["new", "learning", "mastered", "struggling"]

STATUS_LABELS: Final[dict[str, str]] = {
    "new": "New",
    "learning": "Learning",
    "mastered": "Mastered",
    "struggling": "Needs Practice",
}

RECORD_COLUMNS: Final[list[str]] = [
    "word",
    "weight",
    "interval",
    "ease_factor",
    "last_reviewed",
    "review_count",
    "correct_streak",
    "avg_response_time",
]

DETAIL_COLUMNS: Final[list[str]] = [
    "word",
    "weight",
    "interval",
    "correct_streak",
    "review_count",
    "avg_response_time",
    "status",
]

__all__ = [
    "WordStatus",
    "STATUS_LABELS",
    "RECORD_COLUMNS",
    "DETAIL_COLUMNS",
    "MASTERED_MAX_WEIGHT",
    "MASTERED_MIN_STREAK",
    "STRUGGLING_MIN_WEIGHT",
]
