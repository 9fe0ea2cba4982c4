"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

import pandas as pd

from vocab_core.analytics.constants import RECORD_COLUMNS
from vocab_core.scheduler.learning_state import LearningStore


def load_records_df(store: LearningStore) -> pd.DataFrame:
    """
    Load every record of a store into a dataframe (one row per word).

    The version tag is not a word and never appears as a row.
    """
    if len(store) == 0:
        return pd.DataFrame(columns=RECORD_COLUMNS)

    rows = [
        {
            "word": record.word,
            "weight": record.weight,
            "interval": record.interval,
            "ease_factor": record.ease_factor,
            "last_reviewed": record.last_reviewed,
            "review_count": record.review_count,
            "correct_streak": record.correct_streak,
            "avg_response_time": record.avg_response_time,
        }
        for record in store.records.values()
    ]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
