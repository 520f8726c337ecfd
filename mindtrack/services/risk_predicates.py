"""Risk predicates shared by the entry classifier and the risk aggregator.

Every threshold comes from :mod:`mindtrack.core.risk_policies`. Entries are
read by attribute, so ORM rows and ``JournalEntryOut`` models both work.
Missing or out-of-range scores make a predicate False instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from mindtrack.core.risk_policies import (
    EXTREME_SCORE_MIN,
    HIGH_FLAG_MOOD_MAX,
    LOW_MOOD_MAX,
    SCORE_MAX,
    SCORE_MIN,
    VERY_LOW_MOOD_MAX,
)


def valid_score(value: Any) -> int | None:
    """Return ``value`` if it is an integer score in range, else None."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if SCORE_MIN <= value <= SCORE_MAX:
        return value
    return None


def has_risk_phrase(text: str | None, phrases: Iterable[str]) -> bool:
    lowered = (text or "").lower()
    for phrase in phrases:
        p = phrase.strip().lower()
        if p and p in lowered:
            return True
    return False


def is_very_low_mood(entry: Any) -> bool:
    mood = valid_score(entry.mood)
    return mood is not None and mood <= VERY_LOW_MOOD_MAX


def is_high_flag_mood(entry: Any) -> bool:
    mood = valid_score(entry.mood)
    return mood is not None and mood <= HIGH_FLAG_MOOD_MAX


def is_low_mood(entry: Any) -> bool:
    mood = valid_score(entry.mood)
    return mood is not None and mood <= LOW_MOOD_MAX


def is_extreme_anxiety(entry: Any) -> bool:
    anxiety = valid_score(entry.anxiety)
    return anxiety is not None and anxiety >= EXTREME_SCORE_MIN


def is_extreme_stress(entry: Any) -> bool:
    stress = valid_score(entry.stress)
    return stress is not None and stress >= EXTREME_SCORE_MIN


@dataclass(frozen=True)
class EntrySignals:
    """Single-entry crisis predicates."""

    risk_phrase: bool
    very_low_mood: bool
    extreme_anxiety: bool
    extreme_stress: bool

    @property
    def is_critical(self) -> bool:
        return self.risk_phrase or (
            self.very_low_mood and (self.extreme_anxiety or self.extreme_stress)
        )


def entry_signals(entry: Any, phrases: Iterable[str]) -> EntrySignals:
    return EntrySignals(
        risk_phrase=has_risk_phrase(entry.text, phrases),
        very_low_mood=is_very_low_mood(entry),
        extreme_anxiety=is_extreme_anxiety(entry),
        extreme_stress=is_extreme_stress(entry),
    )
