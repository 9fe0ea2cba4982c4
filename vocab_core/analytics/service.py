"""
Service layer to assemble learning statistics and reports.
"""

from __future__ import annotations

import pandas as pd

from vocab_core.analytics.metrics import (
    classify_word,
    compute_learning_stats,
    compute_progress_percent,
    compute_word_details,
)
from vocab_core.analytics.queries import load_records_df
from vocab_core.analytics.types import LearningReport, LearningStats
from vocab_core.scheduler.learning_state import LearningStore


def get_learning_stats(store: LearningStore) -> LearningStats:
    """
    Aggregate a store into mastered / learning / struggling counts.
    """
    return compute_learning_stats(load_records_df(store))


def build_learning_report(store: LearningStore) -> LearningReport:
    """
    Build the stats, progress percentage and per-word table for a report view.
    """
    records_df = load_records_df(store)
    stats = compute_learning_stats(records_df)
    statuses = pd.Series(
        [classify_word(record) for record in store.records.values()],
        dtype="object",
    )

    return LearningReport(
        stats=stats,
        progress_percent=compute_progress_percent(stats),
        word_details=compute_word_details(records_df, statuses),
    )
