"""Risk policy constants shared by the entry classifier and risk aggregator."""

from __future__ import annotations

# Valid range for mood, anxiety and stress scores
SCORE_MIN = 0
SCORE_MAX = 10

# Mood at or below this is "very low" (critical when paired with an extreme score)
VERY_LOW_MOOD_MAX = 1

# Classifier raises a high flag at or below this mood
HIGH_FLAG_MOOD_MAX = 2

# Mood at or below this counts as a low-mood entry
LOW_MOOD_MAX = 3

# Anxiety or stress at or above this is "extreme"
EXTREME_SCORE_MIN = 9

# Most recent mood must fall more than this many points below the previous one
MOOD_DECLINE_POINTS = 3

# Number of most recent entries that must all be low for a consecutive run
CONSECUTIVE_LOW_MOOD_RUN = 3

# Low-mood entry counts for the high and medium tiers
HIGH_LOW_MOOD_COUNT = 3
MEDIUM_LOW_MOOD_COUNT = 2

# Trailing window evaluated on dashboard reads: today and the six days before it
RISK_WINDOW_DAYS = 7
