"""
Decay Model - Overdue Correction for Selection Weight

Words not reviewed within their expected interval drift back up in
priority. The boost is logarithmic in how overdue the word is:

    overdue = days_since_review / interval
    effective = min(8.0, weight * (1 + ln(overdue)))   if overdue > 1

so a word that is 10x overdue is pulled up, but not 10x as hard as
one that is just past due.
"""

from __future__ import annotations

import math
from typing import Optional

from vocab_core.scheduler.constants import MAX_WEIGHT, MS_PER_DAY
from vocab_core.scheduler.learning_state import WordLearningRecord, now_ms


def days_since_review(record: WordLearningRecord, now: Optional[int] = None) -> Optional[float]:
    """
    Days elapsed since the last review.

    Returns:
        Days since review, or None for a word never reviewed
    """
    if record.last_reviewed is None:
        return None
    if now is None:
        now = now_ms()
    return (now - record.last_reviewed) / MS_PER_DAY


def is_overdue(record: WordLearningRecord, now: Optional[int] = None) -> bool:
    """True when more days have passed than the word's interval."""
    days = days_since_review(record, now)
    return days is not None and days > record.interval


def calculate_effective_weight(record: WordLearningRecord, now: Optional[int] = None) -> float:
    """
    Selection weight after the overdue correction.

    Never lower than record.weight.
    """
    days = days_since_review(record, now)
    if days is None:
        return record.weight

    overdue_factor = days / record.interval
    if overdue_factor > 1:
        return min(MAX_WEIGHT, record.weight * (1 + math.log(overdue_factor)))

    return record.weight
