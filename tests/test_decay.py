"""
Tests for the overdue decay model.
"""

import math

import pytest

from vocab_core.scheduler import (
    MAX_WEIGHT,
    WordLearningRecord,
    calculate_effective_weight,
    days_since_review,
    is_overdue,
)

from conftest import NOW, days_ago


def test_never_reviewed_keeps_weight():
    record = WordLearningRecord(word="cat", weight=2.4)
    assert calculate_effective_weight(record, NOW) == 2.4
    assert days_since_review(record, NOW) is None
    assert not is_overdue(record, NOW)


def test_within_interval_keeps_weight():
    record = WordLearningRecord(word="cat", weight=2.0, interval=4, last_reviewed=days_ago(3))
    assert calculate_effective_weight(record, NOW) == 2.0
    assert not is_overdue(record, NOW)


def test_overdue_logarithmic_boost():
    record = WordLearningRecord(word="cat", weight=2.0, interval=4, last_reviewed=days_ago(10))

    effective = calculate_effective_weight(record, NOW)

    assert effective == pytest.approx(2.0 * (1 + math.log(2.5)))
    assert effective == pytest.approx(3.83, abs=0.01)
    assert is_overdue(record, NOW)


def test_boost_capped_at_max_weight():
    record = WordLearningRecord(word="cat", weight=6.0, interval=1, last_reviewed=days_ago(300))
    assert calculate_effective_weight(record, NOW) == MAX_WEIGHT


def test_days_since_review():
    record = WordLearningRecord(word="cat", last_reviewed=days_ago(1.5))
    assert days_since_review(record, NOW) == pytest.approx(1.5)


@pytest.mark.parametrize("days", [0, 0.5, 1, 2, 7, 30, 365, 2000])
@pytest.mark.parametrize("weight", [0.5, 1.0, 3.0, 8.0])
def test_effective_weight_never_below_weight(days, weight):
    record = WordLearningRecord(word="cat", weight=weight, interval=2, last_reviewed=days_ago(days))
    assert calculate_effective_weight(record, NOW) >= weight


def test_out_of_range_record_is_clamped_before_decay():
    record = WordLearningRecord(word="cat", weight=10.0, interval=0, last_reviewed=days_ago(2))

    effective = calculate_effective_weight(record, NOW)

    assert record.interval == 1
    assert effective == MAX_WEIGHT
    assert effective >= record.weight
