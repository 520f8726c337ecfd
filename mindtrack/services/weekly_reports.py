"""Weekly progress reports built from a patient's full journal history."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Any

from mindtrack.schemas.journal import JournalEntryOut
from mindtrack.schemas.progress import WeekBucket, WeeklyMoodDelta, WeeklyReport
from mindtrack.services.risk_predicates import valid_score


def iso_week_bucket(day: date) -> WeekBucket:
    """ISO-8601 week of ``day`` using the Thursday rule.

    The week belongs to the year its Thursday falls in, so late-December and
    early-January dates may be attributed to the neighbouring year.
    """
    thursday = day + timedelta(days=4 - day.isoweekday())
    days_since_jan1 = (thursday - date(thursday.year, 1, 1)).days
    week = math.ceil((days_since_jan1 + 1) / 7)
    monday = thursday - timedelta(days=3)
    return WeekBucket(
        year=thursday.year,
        week=week,
        start_date=monday,
        end_date=monday + timedelta(days=6),
    )


def _mean(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def _build_report(bucket: WeekBucket, entries: list[Any]) -> WeeklyReport:
    moods = [m for m in (valid_score(e.mood) for e in entries) if m is not None]
    anxieties = [a for a in (valid_score(e.anxiety) for e in entries) if a is not None]
    sleeps = [e.sleep for e in entries if e.sleep is not None]
    stresses = [s for s in (valid_score(e.stress) for e in entries) if s is not None]

    return WeeklyReport(
        year=bucket.year,
        week=bucket.week,
        week_key=bucket.week_key,
        start_date=bucket.start_date,
        end_date=bucket.end_date,
        entries_count=len(entries),
        avg_mood=_mean(moods),
        avg_anxiety=_mean(anxieties),
        avg_sleep=_mean(sleeps),
        avg_stress=_mean(stresses),
        min_mood=min(moods) if moods else None,
        max_mood=max(moods) if moods else None,
        entries=[JournalEntryOut.model_validate(e) for e in entries],
    )


def build_weekly_reports(entries: Iterable[Any]) -> list[WeeklyReport]:
    """Group entries into ISO weeks, newest week first.

    Averages only count entries that define the field; entries inside a week
    are in ascending date order (input order among same-day entries).
    """
    buckets: dict[WeekBucket, list[Any]] = {}
    for entry in entries:
        buckets.setdefault(iso_week_bucket(entry.date), []).append(entry)

    reports = [
        _build_report(bucket, sorted(week_entries, key=lambda e: e.date))
        for bucket, week_entries in buckets.items()
    ]
    reports.sort(key=lambda r: (r.year, r.week), reverse=True)
    return reports


def week_over_week_mood_deltas(reports: Sequence[WeeklyReport]) -> list[WeeklyMoodDelta]:
    """Mood change of each week against the next older report in the list."""
    deltas: list[WeeklyMoodDelta] = []
    for i, current in enumerate(reports):
        previous = reports[i + 1] if i + 1 < len(reports) else None
        delta = None
        if previous is not None and current.avg_mood is not None and previous.avg_mood is not None:
            delta = round(current.avg_mood - previous.avg_mood, 2)
        deltas.append(
            WeeklyMoodDelta(
                week_key=current.week_key,
                avg_mood=current.avg_mood,
                previous_week_key=previous.week_key if previous else None,
                previous_avg_mood=previous.avg_mood if previous else None,
                delta=delta,
            )
        )
    return deltas
