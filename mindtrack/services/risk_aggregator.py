"""Practitioner dashboard risk aggregation.

Re-evaluates the trailing window of every patient's journal on each read,
assigns a severity tier with human-readable reasons, and builds a
practice-wide summary of the same window. Nothing is cached or stored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from mindtrack.core.config import settings
from mindtrack.core.risk_policies import (
    CONSECUTIVE_LOW_MOOD_RUN,
    HIGH_LOW_MOOD_COUNT,
    MEDIUM_LOW_MOOD_COUNT,
    MOOD_DECLINE_POINTS,
    RISK_WINDOW_DAYS,
)
from mindtrack.schemas.enums import AlertType, Severity
from mindtrack.schemas.journal import JournalEntryOut
from mindtrack.schemas.risk import PatientRef, RiskAlert, RiskOverview, WeeklySummary
from mindtrack.services.risk_predicates import entry_signals, is_low_mood, valid_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowSignals:
    """Signals computed over a patient's recent entries, newest first."""

    low_mood_count: int
    consecutive_low_mood: bool
    mood_decline: bool


def in_window(entry: Any, today: date) -> bool:
    """True for entries dated today or in the six days before it.

    Future-dated entries are kept.
    """
    return (today - entry.date).days < RISK_WINDOW_DAYS


def recent_entries(entries: Iterable[Any], today: date) -> list[Any]:
    """Entries dated within the trailing window, newest date first.

    Entries sharing a date are ordered newest-created first (then by id).
    """
    window = [e for e in entries if in_window(e, today)]
    window.sort(key=_created_sort_key, reverse=True)
    window.sort(key=lambda e: e.date, reverse=True)
    return window


def _created_sort_key(entry: Any) -> tuple[datetime, int]:
    created = entry.created_at
    if created is None:
        created = datetime.min
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created, getattr(entry, "id", None) or 0


def window_signals(window: Sequence[Any]) -> WindowSignals:
    low_mood_count = sum(1 for e in window if is_low_mood(e))

    run = window[:CONSECUTIVE_LOW_MOOD_RUN]
    consecutive = len(run) == CONSECUTIVE_LOW_MOOD_RUN and all(is_low_mood(e) for e in run)

    # Only the two most recent entries are compared, however many days apart.
    decline = False
    if len(window) >= 2:
        latest, previous = valid_score(window[0].mood), valid_score(window[1].mood)
        if latest is not None and previous is not None:
            decline = latest < previous - MOOD_DECLINE_POINTS

    return WindowSignals(
        low_mood_count=low_mood_count,
        consecutive_low_mood=consecutive,
        mood_decline=decline,
    )


def _low_mood_reason(count: int) -> str:
    return f"{count} low-mood entries in the last {RISK_WINDOW_DAYS} days"


def evaluate_patient(
    patient: PatientRef,
    entries: Iterable[Any],
    *,
    today: date,
    now: datetime,
    phrases: Iterable[str],
) -> RiskAlert | None:
    """Severity ladder for one patient. Returns None for low or no recent data."""
    window = recent_entries(entries, today)
    if not window:
        return None

    last_entry = window[0]
    signals = entry_signals(last_entry, phrases)
    trend = window_signals(window)
    reasons: list[str] = []

    if signals.is_critical:
        severity, alert_type = Severity.CRITICAL, AlertType.RISK_SUICIDE
        if signals.risk_phrase:
            reasons.append("Risk phrase mentioned in journal")
        if signals.very_low_mood:
            reasons.append("Extremely low mood (0-1/10)")
        if signals.extreme_anxiety:
            reasons.append("Extreme anxiety (9-10/10)")
        if signals.extreme_stress:
            reasons.append("Extreme stress (9-10/10)")
    elif (
        signals.very_low_mood
        or (trend.low_mood_count >= HIGH_LOW_MOOD_COUNT and trend.consecutive_low_mood)
        or trend.mood_decline
    ):
        severity, alert_type = Severity.HIGH, AlertType.DETERIORATION
        if signals.very_low_mood:
            reasons.append("Very low mood (0-1/10)")
        if trend.consecutive_low_mood:
            reasons.append("Consecutive low mood entries")
        if trend.mood_decline:
            reasons.append("Rapid mood decline")
        if trend.low_mood_count >= HIGH_LOW_MOOD_COUNT:
            reasons.append(_low_mood_reason(trend.low_mood_count))
    elif trend.low_mood_count >= MEDIUM_LOW_MOOD_COUNT:
        severity, alert_type = Severity.MEDIUM, AlertType.DETERIORATION
        reasons.append(_low_mood_reason(trend.low_mood_count))
    else:
        return None

    return RiskAlert(
        patient_id=patient.id,
        patient_name=patient.name,
        severity=severity,
        alert_type=alert_type,
        reasons=reasons,
        recent_low_mood_entry_count=trend.low_mood_count,
        last_entry=JournalEntryOut.model_validate(last_entry),
        generated_at=now,
    )


def summarize_week(
    patients: Iterable[PatientRef],
    entries_by_patient: Mapping[int, Sequence[Any]],
    today: date,
) -> WeeklySummary:
    """Practice-wide counts and mean mood over the trailing window."""
    total_entries = 0
    mood_sum = 0
    mood_count = 0
    contributing: set[int] = set()
    by_day: dict[str, int] = {}

    for patient in patients:
        window = [e for e in entries_by_patient.get(patient.id, ()) if in_window(e, today)]
        if not window:
            continue
        contributing.add(patient.id)
        total_entries += len(window)
        for entry in window:
            mood = valid_score(entry.mood)
            if mood is None:
                logger.debug("summary_skip_malformed_mood patient_id=%s entry_id=%s", patient.id, getattr(entry, "id", None))
            else:
                mood_sum += mood
                mood_count += 1
            day = entry.date.isoformat()
            by_day[day] = by_day.get(day, 0) + 1

    return WeeklySummary(
        total_entries=total_entries,
        avg_mood=round(mood_sum / mood_count, 2) if mood_count else 0,
        patients_with_entries=len(contributing),
        entries_by_day=dict(sorted(by_day.items())),
    )


def aggregate_risk(
    practitioner_id: int,
    patients: Sequence[Any],
    entries_by_patient: Mapping[int, Sequence[Any]],
    *,
    today: date | None = None,
    now: datetime | None = None,
    phrases: Iterable[str] | None = None,
) -> RiskOverview:
    """Ranked at-risk patients plus the weekly summary for one practitioner.

    ``patients`` may be ORM rows or ``PatientRef`` models; patients missing
    from ``entries_by_patient`` are treated as having no entries.
    """
    now = now or datetime.now(timezone.utc)
    today = today or now.date()
    phrases = list(settings.risk_phrases if phrases is None else phrases)
    refs = [PatientRef.model_validate(p) for p in patients]

    alerts: list[RiskAlert] = []
    for patient in refs:
        alert = evaluate_patient(
            patient,
            entries_by_patient.get(patient.id, ()),
            today=today,
            now=now,
            phrases=phrases,
        )
        if alert is None:
            continue
        if alert.severity is Severity.CRITICAL:
            logger.warning(
                "critical_risk_alert practitioner_id=%s patient_id=%s",
                practitioner_id,
                patient.id,
            )
        alerts.append(alert)

    # list.sort is stable, so patients keep their input order within a tier
    alerts.sort(key=lambda a: a.severity.rank)

    summary = summarize_week(refs, entries_by_patient, today)
    logger.info(
        "risk_aggregated practitioner_id=%s patients=%d alerts=%d entries=%d",
        practitioner_id,
        len(refs),
        len(alerts),
        summary.total_entries,
    )
    return RiskOverview(alerts=alerts, weekly_summary=summary)
