"""
Scheduler Constants and Parameters

All tunable values for the weighted review scheduler in one place.
"""

from __future__ import annotations

from typing import Final


# ---- Store Schema ----

STORE_VERSION: Final[int] = 1
VERSION_KEY: Final[str] = "version"


# ---- Time ----

MS_PER_DAY: Final[int] = 86_400_000
QUICK_THRESHOLD_MS: Final[int] = 3000       # Answers faster than this are "quick"
MAX_RESPONSE_TIME_MS: Final[int] = 600_000  # Longer samples are capped (10 minutes)


# ---- Bounds ----

MIN_WEIGHT = 0.5
MAX_WEIGHT = 8.0
MIN_INTERVAL = 1.0
MAX_INTERVAL = 365.0
MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 2.5


# ---- Defaults for a new word ----

DEFAULT_WEIGHT = 1.0
DEFAULT_INTERVAL = 1.0
DEFAULT_EASE_FACTOR = 2.5


# ---- Update Multipliers ----

QUICK_WEIGHT_FACTOR = 0.6
QUICK_INTERVAL_FACTOR = 2.5
QUICK_EASE_BONUS = 0.1

SLOW_WEIGHT_FACTOR = 0.8
SLOW_INTERVAL_FACTOR = 1.5

STREAK_BONUS_THRESHOLD = 3
STREAK_WEIGHT_FACTOR = 0.9

WRONG_WEIGHT_FACTOR = 2.0
WRONG_EASE_PENALTY = 0.2

# Rolling average of response time: 70% history, 30% new sample
RESPONSE_TIME_HISTORY_WEIGHT = 0.7
RESPONSE_TIME_SAMPLE_WEIGHT = 0.3


# ---- Selection Boosts ----

NEW_WORD_BOOST = 1.5
OVERDUE_BOOST = 2.0


# ---- Legacy Migration ----

LEGACY_HARD_INTERVAL = 1.0  # legacy weight > 1
LEGACY_EASY_INTERVAL = 3.0


# ---- Classification ----

MASTERED_MAX_WEIGHT = 0.7
MASTERED_MIN_STREAK = 3
STRUGGLING_MIN_WEIGHT = 4.0
