"""
Weighted review scheduler for vocabulary practice.

A lightweight spaced-repetition heuristic:
- Bounded per-word weight (lower = better known)
- Interval growth on correct answers, reset on mistakes
- Logarithmic boost for overdue words
- Weighted sampling without replacement to build review sets

Everything here is pure: the host loads the store, passes it in, and
persists whatever comes back.

Quick start:
    from vocab_core import scheduler

    store = scheduler.load_learning_store(persisted_blob)
    words = scheduler.get_words_for_review(word_list, store, count=10)
    store, event = scheduler.process_answer(store, "cat", True, 1200)
"""

# Core API
from vocab_core.scheduler.scheduler import process_answer

from vocab_core.scheduler.learning_state import (
    LearningStore,
    WordLearningRecord,
    create_default_learning,
    now_ms,
)
from vocab_core.scheduler.updates import update_word_learning
from vocab_core.scheduler.decay import (
    calculate_effective_weight,
    days_since_review,
    is_overdue,
)
from vocab_core.scheduler.selection import (
    ScoredCandidate,
    calculate_priority,
    get_words_for_review,
    score_candidates,
    weighted_random_select,
)
from vocab_core.scheduler.migration import (
    is_legacy_blob,
    load_learning_store,
    migrate_legacy_weights,
)

# Constants and parameters
from vocab_core.scheduler.constants import (
    STORE_VERSION,
    QUICK_THRESHOLD_MS,
    MIN_WEIGHT,
    MAX_WEIGHT,
    MIN_INTERVAL,
    MAX_INTERVAL,
    MIN_EASE_FACTOR,
    MAX_EASE_FACTOR,
)


__all__ = [
    # Core algorithm
    "process_answer",
    "update_word_learning",
    "calculate_effective_weight",
    "get_words_for_review",
    "migrate_legacy_weights",
    "load_learning_store",

    # State
    "LearningStore",
    "WordLearningRecord",
    "create_default_learning",
    "now_ms",

    # Helpers
    "days_since_review",
    "is_overdue",
    "is_legacy_blob",
    "ScoredCandidate",
    "calculate_priority",
    "score_candidates",
    "weighted_random_select",

    # Parameters
    "STORE_VERSION",
    "QUICK_THRESHOLD_MS",
    "MIN_WEIGHT",
    "MAX_WEIGHT",
    "MIN_INTERVAL",
    "MAX_INTERVAL",
    "MIN_EASE_FACTOR",
    "MAX_EASE_FACTOR",
]
