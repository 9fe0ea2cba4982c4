"""
Scheduler - Answer Processing

Pure answer handling over a LearningStore (no I/O).

Main workflow:
1. Look up the word's record (or a default one for a new word)
2. Apply the answer update rules
3. Return the new store + event data

The caller persists the returned store after every answer.
"""

from __future__ import annotations

from typing import Optional, Tuple

from vocab_core.scheduler import updates
from vocab_core.scheduler.learning_state import LearningStore, now_ms


def process_answer(
    store: LearningStore,
    word: str,
    is_correct: bool,
    response_time_ms: float,
    now: Optional[int] = None
) -> Tuple[LearningStore, dict]:
    """
    Score one answer and return the updated store plus event data.

    The input store is not modified.

    Args:
        store: Current learning store
        word: Word that was answered
        is_correct: Whether the answer was correct
        response_time_ms: Time taken to answer in milliseconds
        now: Answer timestamp in epoch milliseconds (defaults to now)

    Returns:
        Tuple of (new_store, event_data_dict)
    """
    if now is None:
        now = now_ms()

    record = store.record_for(word)
    updated = updates.update_word_learning(record, is_correct, response_time_ms, now)

    event_data = {
        'word': word,
        'is_correct': is_correct,
        'response_time_ms': response_time_ms,
        'timestamp': now,
        'is_new_word': word not in store,
        'weight_before': record.weight,
        'weight_after': updated.weight,
        'interval_before': record.interval,
        'interval_after': updated.interval,
        'correct_streak_after': updated.correct_streak,
        'review_count_after': updated.review_count,
    }

    return store.with_record(updated), event_data
