"""
Types for learning reports.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class LearningStats:
    """
    Store-wide word counts by status and mean response time.

    mastered + learning + struggling == total_words.
    """
    total_words: int
    mastered: int
    learning: int
    struggling: int
    avg_response_time: int

    def to_dict(self) -> dict[str, int]:
        """Reporting shape with the camelCase keys the UI reads."""
        return {
            "totalWords": self.total_words,
            "mastered": self.mastered,
            "learning": self.learning,
            "struggling": self.struggling,
            "avgResponseTime": self.avg_response_time,
        }


@dataclass(frozen=True)
class LearningReport:
    """
    Precomputed values for a learner progress report.
    """
    stats: LearningStats
    progress_percent: int
    word_details: pd.DataFrame
