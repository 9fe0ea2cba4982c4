"""
Tests for learning statistics and reports.
"""

import pytest

from vocab_core.analytics import (
    STATUS_LABELS,
    LearningStats,
    build_learning_report,
    classify_word,
    get_learning_stats,
)
from vocab_core.scheduler import LearningStore, WordLearningRecord


@pytest.fixture
def mixed_store():
    return LearningStore.from_blob({
        "version": 1,
        "a": {"weight": 0.5, "correctStreak": 3},
        "b": {"weight": 5},
        "c": {"weight": 2, "correctStreak": 0},
    })


class TestGetLearningStats:

    def test_empty_store(self):
        stats = get_learning_stats(LearningStore.empty())
        assert stats == LearningStats(total_words=0, mastered=0, learning=0, struggling=0, avg_response_time=0)

    def test_classification_counts(self, mixed_store):
        stats = get_learning_stats(mixed_store)

        assert stats.total_words == 3
        assert stats.mastered == 1
        assert stats.struggling == 1
        assert stats.learning == 1

    def test_counts_sum_to_total(self):
        store = LearningStore(records={
            f"w{i}": WordLearningRecord(word=f"w{i}", weight=w, correct_streak=s)
            for i, (w, s) in enumerate([(0.5, 5), (0.7, 3), (0.7, 2), (0.8, 9), (3.9, 0), (4.0, 0), (8.0, 1)])
        })
        stats = get_learning_stats(store)

        assert stats.mastered == 2
        assert stats.struggling == 2
        assert stats.mastered + stats.learning + stats.struggling == stats.total_words

    def test_avg_response_time_rounded_mean(self):
        store = LearningStore(records={
            "a": WordLearningRecord(word="a", avg_response_time=1000),
            "b": WordLearningRecord(word="b", avg_response_time=2001),
        })
        assert get_learning_stats(store).avg_response_time == 1501

    def test_to_dict_uses_reporting_keys(self, mixed_store):
        assert get_learning_stats(mixed_store).to_dict() == {
            "totalWords": 3,
            "mastered": 1,
            "learning": 1,
            "struggling": 1,
            "avgResponseTime": 0,
        }


class TestClassifyWord:

    def test_statuses(self):
        assert classify_word(WordLearningRecord(word="a", weight=0.5, correct_streak=3, review_count=3)) == "mastered"
        assert classify_word(WordLearningRecord(word="b", weight=4.0, review_count=2)) == "struggling"
        assert classify_word(WordLearningRecord(word="c")) == "new"
        assert classify_word(WordLearningRecord(word="d", weight=0.6, correct_streak=2, review_count=2)) == "learning"

    def test_low_weight_without_streak_is_not_mastered(self):
        assert classify_word(WordLearningRecord(word="a", weight=0.5, correct_streak=1, review_count=1)) == "learning"

    def test_every_status_has_a_label(self):
        assert set(STATUS_LABELS) == {"new", "learning", "mastered", "struggling"}


class TestBuildLearningReport:

    def test_report(self, mixed_store):
        report = build_learning_report(mixed_store)

        assert report.stats == get_learning_stats(mixed_store)
        assert report.progress_percent == 33
        assert list(report.word_details["word"]) == ["b", "c", "a"]
        assert list(report.word_details["status"]) == ["struggling", "new", "mastered"]

    def test_empty_report(self):
        report = build_learning_report(LearningStore.empty())

        assert report.progress_percent == 0
        assert report.word_details.empty
        assert "status" in report.word_details.columns
