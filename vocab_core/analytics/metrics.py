"""
Metric computations for learning reports.
"""

from __future__ import annotations

import pandas as pd

from vocab_core.analytics.constants import (
    DETAIL_COLUMNS,
    MASTERED_MAX_WEIGHT,
    MASTERED_MIN_STREAK,
    STRUGGLING_MIN_WEIGHT,
    WordStatus,
)
from vocab_core.analytics.types import LearningStats
from vocab_core.scheduler.learning_state import WordLearningRecord, round_half_up


def is_mastered(weight: float, correct_streak: int) -> bool:
    return weight <= MASTERED_MAX_WEIGHT and correct_streak >= MASTERED_MIN_STREAK


def is_struggling(weight: float) -> bool:
    return weight >= STRUGGLING_MIN_WEIGHT


def classify_word(record: WordLearningRecord) -> WordStatus:
    """
    Status of one word, derived from weight and streak at read time.

    Mastered and struggling take precedence; an unclassified word that
    was never reviewed is new, anything else is learning.
    """
    if is_mastered(record.weight, record.correct_streak):
        return "mastered"
    if is_struggling(record.weight):
        return "struggling"
    if record.review_count == 0:
        return "new"
    return "learning"


def compute_learning_stats(records_df: pd.DataFrame) -> LearningStats:
    """
    Count mastered / struggling / learning words and average latency.

    learning is the remainder, so the three counts always sum to the total.
    """
    total = len(records_df)
    if total == 0:
        return LearningStats(
            total_words=0,
            mastered=0,
            learning=0,
            struggling=0,
            avg_response_time=0,
        )

    mastered_mask = (
        (records_df["weight"] <= MASTERED_MAX_WEIGHT)
        & (records_df["correct_streak"] >= MASTERED_MIN_STREAK)
    )
    struggling_mask = records_df["weight"] >= STRUGGLING_MIN_WEIGHT

    mastered = int(mastered_mask.sum())
    struggling = int(struggling_mask.sum())
    avg_response_time = float(records_df["avg_response_time"].fillna(0).mean())

    return LearningStats(
        total_words=total,
        mastered=mastered,
        learning=total - mastered - struggling,
        struggling=struggling,
        avg_response_time=round_half_up(avg_response_time),
    )


def compute_progress_percent(stats: LearningStats) -> int:
    """Share of words mastered, as a whole percentage."""
    if stats.total_words == 0:
        return 0
    return round_half_up(stats.mastered / stats.total_words * 100)


def compute_word_details(records_df: pd.DataFrame, statuses: pd.Series) -> pd.DataFrame:
    """
    Per-word detail table, hardest words (highest weight) first.
    """
    if records_df.empty:
        return pd.DataFrame(columns=DETAIL_COLUMNS)

    details = records_df.assign(status=statuses.values)[DETAIL_COLUMNS]
    return details.sort_values("weight", ascending=False, kind="stable").reset_index(drop=True)
