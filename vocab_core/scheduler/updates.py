"""
Answer Updates

Implements the weight / interval / ease updates applied after each answer.

Key principles:
- Quick correct answers are the strongest mastery signal
- Slow correct answers still make progress, just less of it
- Long streaks earn an extra weight reduction
- A wrong answer resets progress and at least doubles the weight
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional

from vocab_core.scheduler.constants import (
    MAX_EASE_FACTOR,
    MAX_INTERVAL,
    MAX_RESPONSE_TIME_MS,
    MAX_WEIGHT,
    MIN_EASE_FACTOR,
    MIN_INTERVAL,
    MIN_WEIGHT,
    QUICK_EASE_BONUS,
    QUICK_INTERVAL_FACTOR,
    QUICK_THRESHOLD_MS,
    QUICK_WEIGHT_FACTOR,
    RESPONSE_TIME_HISTORY_WEIGHT,
    RESPONSE_TIME_SAMPLE_WEIGHT,
    SLOW_INTERVAL_FACTOR,
    SLOW_WEIGHT_FACTOR,
    STREAK_BONUS_THRESHOLD,
    STREAK_WEIGHT_FACTOR,
    WRONG_EASE_PENALTY,
    WRONG_WEIGHT_FACTOR,
)
from vocab_core.scheduler.learning_state import (
    WordLearningRecord,
    clamp,
    now_ms,
    round_half_up,
)

logger = logging.getLogger(__name__)


def sanitize_response_time(response_time_ms: float) -> float:
    """
    Clamp a measured response time into [0, MAX_RESPONSE_TIME_MS].

    Missing, NaN and negative samples count as 0. Anything slower than
    the cap, including +inf, counts as the cap.
    """
    if response_time_ms is None or math.isnan(response_time_ms) or response_time_ms < 0:
        logger.debug("Response time %r clamped to 0", response_time_ms)
        return 0
    if response_time_ms > MAX_RESPONSE_TIME_MS:
        logger.debug("Response time %r clamped to %d", response_time_ms, MAX_RESPONSE_TIME_MS)
        return MAX_RESPONSE_TIME_MS
    return response_time_ms


def update_on_correct(
    weight: float,
    interval: float,
    ease_factor: float,
    correct_streak: int,
    response_time_ms: float
) -> tuple[float, float, float, int]:
    """
    Apply the correct-answer rules.

    Quick (< 3s):  weight * 0.6, interval * 2.5, ease + 0.1
    Slow (>= 3s):  weight * 0.8, interval * 1.5, ease unchanged
    Streak >= 3 (after incrementing): extra weight * 0.9

    Returns:
        Tuple of (weight, interval, ease_factor, correct_streak)
    """
    correct_streak += 1

    if response_time_ms < QUICK_THRESHOLD_MS:
        weight = max(MIN_WEIGHT, weight * QUICK_WEIGHT_FACTOR)
        interval = min(MAX_INTERVAL, interval * QUICK_INTERVAL_FACTOR)
        ease_factor = min(MAX_EASE_FACTOR, ease_factor + QUICK_EASE_BONUS)
    else:
        weight = max(MIN_WEIGHT, weight * SLOW_WEIGHT_FACTOR)
        interval = min(MAX_INTERVAL, interval * SLOW_INTERVAL_FACTOR)

    # Streak bonus stacks on top of the quick/slow adjustment
    if correct_streak >= STREAK_BONUS_THRESHOLD:
        weight = max(MIN_WEIGHT, weight * STREAK_WEIGHT_FACTOR)

    return weight, interval, ease_factor, correct_streak


def update_on_wrong(
    weight: float,
    ease_factor: float
) -> tuple[float, float, float, int]:
    """
    Apply the wrong-answer rules: streak to 0, weight doubled,
    interval back to 1 day, ease - 0.2.

    Returns:
        Tuple of (weight, interval, ease_factor, correct_streak)
    """
    weight = min(MAX_WEIGHT, weight * WRONG_WEIGHT_FACTOR)
    ease_factor = max(MIN_EASE_FACTOR, ease_factor - WRONG_EASE_PENALTY)
    return weight, MIN_INTERVAL, ease_factor, 0


def update_avg_response_time(avg_response_time: float, response_time_ms: float) -> float:
    """Rolling average: the first sample is taken as is, then 70% old / 30% new."""
    if not avg_response_time:
        return response_time_ms
    return round_half_up(
        avg_response_time * RESPONSE_TIME_HISTORY_WEIGHT
        + response_time_ms * RESPONSE_TIME_SAMPLE_WEIGHT
    )


def update_word_learning(
    record: WordLearningRecord,
    is_correct: bool,
    response_time_ms: float,
    now: Optional[int] = None
) -> WordLearningRecord:
    """
    Produce the next learning record after an answer.

    The input record is not modified.

    Args:
        record: Current learning record (stored or default)
        is_correct: Whether the answer was correct
        response_time_ms: Time taken to answer in milliseconds
        now: Review timestamp in epoch milliseconds (defaults to now)

    Returns:
        New WordLearningRecord
    """
    if now is None:
        now = now_ms()

    response_time_ms = sanitize_response_time(response_time_ms)

    if is_correct:
        weight, interval, ease_factor, correct_streak = update_on_correct(
            weight=record.weight,
            interval=record.interval,
            ease_factor=record.ease_factor,
            correct_streak=record.correct_streak,
            response_time_ms=response_time_ms
        )
    else:
        weight, interval, ease_factor, correct_streak = update_on_wrong(
            weight=record.weight,
            ease_factor=record.ease_factor
        )

    return replace(
        record,
        weight=clamp(weight, MIN_WEIGHT, MAX_WEIGHT),
        interval=clamp(interval, MIN_INTERVAL, MAX_INTERVAL),
        ease_factor=clamp(ease_factor, MIN_EASE_FACTOR, MAX_EASE_FACTOR),
        correct_streak=correct_streak,
        last_reviewed=now,
        review_count=record.review_count + 1,
        avg_response_time=update_avg_response_time(record.avg_response_time, response_time_ms),
    )
