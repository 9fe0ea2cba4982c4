"""
Analytics package exports.
"""

from vocab_core.analytics.constants import STATUS_LABELS, WordStatus
from vocab_core.analytics.metrics import classify_word
from vocab_core.analytics.service import build_learning_report, get_learning_stats
from vocab_core.analytics.types import LearningReport, LearningStats

__all__ = [
    "STATUS_LABELS",
    "WordStatus",
    "classify_word",
    "build_learning_report",
    "get_learning_stats",
    "LearningReport",
    "LearningStats",
]
