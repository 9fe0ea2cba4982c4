"""
Selection - Weighted Review Picking

Scores every candidate word and draws a review set without replacement.

Priority per candidate:
- Start from the effective weight (decay model)
- x1.5 if the word has never been reviewed
- x2 if the word is past its interval (on top of the decay boost)

Sampling walks the remaining pool once per draw, so a session costs
O(n * count). That is fine for word lists of a few thousand entries.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from vocab_core.scheduler.constants import NEW_WORD_BOOST, OVERDUE_BOOST
from vocab_core.scheduler.decay import calculate_effective_weight, is_overdue
from vocab_core.scheduler.learning_state import LearningStore, WordLearningRecord, now_ms

logger = logging.getLogger(__name__)


@dataclass
class ScoredCandidate:
    """A candidate item with its learning record and sampling priority."""
    item: Any
    word: str
    record: WordLearningRecord
    priority: float


def word_of(item: Any) -> str:
    """Word key of a candidate: item["word"] for dicts, item.word otherwise."""
    if isinstance(item, Mapping):
        return item["word"]
    try:
        return item.word
    except AttributeError:
        raise KeyError(f"Candidate has no 'word': {item!r}") from None


def calculate_priority(record: WordLearningRecord, now: Optional[int] = None) -> float:
    """Sampling priority for one record."""
    if now is None:
        now = now_ms()

    priority = calculate_effective_weight(record, now)

    if record.review_count == 0:
        priority *= NEW_WORD_BOOST

    if is_overdue(record, now):
        priority *= OVERDUE_BOOST

    return priority


def score_candidates(
    candidates: Sequence[Any],
    store: LearningStore,
    now: Optional[int] = None
) -> list[ScoredCandidate]:
    """
    Score candidates against the store.

    Words without a record are scored from a default record, which is
    not added to the store. Repeated words keep their first occurrence.
    """
    if now is None:
        now = now_ms()

    scored: list[ScoredCandidate] = []
    seen: set[str] = set()
    for item in candidates:
        word = word_of(item)
        if word in seen:
            continue
        seen.add(word)

        record = store.record_for(word)
        scored.append(
            ScoredCandidate(
                item=item,
                word=word,
                record=record,
                priority=calculate_priority(record, now)
            )
        )
    return scored


def weighted_random_select(
    scored: Sequence[ScoredCandidate],
    count: int,
    rng: Optional[random.Random] = None
) -> list[ScoredCandidate]:
    """
    Weighted random selection without replacement.

    Each draw picks a point in [0, total) and walks the remaining
    candidates until the running total passes it. When every remaining
    priority is zero, the draw is uniform instead.
    """
    if rng is None:
        rng = random.Random()

    selected: list[ScoredCandidate] = []
    remaining = list(scored)

    while len(selected) < count and remaining:
        total_weight = sum(c.priority for c in remaining)

        if total_weight <= 0:
            logger.debug("All %d remaining priorities are zero, drawing uniformly", len(remaining))
            index = rng.randrange(len(remaining))
        else:
            draw = rng.random() * total_weight
            # Float rounding can leave the draw unmatched; fall back to the last item
            index = len(remaining) - 1
            running = 0.0
            for i, candidate in enumerate(remaining):
                running += candidate.priority
                if running > draw:
                    index = i
                    break

        selected.append(remaining.pop(index))

    return selected


def get_words_for_review(
    candidates: Sequence[Any],
    store: LearningStore,
    count: int,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[Any]:
    """
    Select candidate items for a review session.

    Args:
        candidates: Items to choose from, each with a "word"
        store: Current learning store
        count: Number of items wanted
        now: Epoch milliseconds used for overdue checks (defaults to now)
        rng: Random source; pass a seeded random.Random for reproducible picks

    Returns:
        Up to count items, in draw order, no word twice
    """
    if count <= 0:
        return []

    scored = score_candidates(candidates, store, now)
    picked = weighted_random_select(scored, count, rng)
    return [c.item for c in picked]
