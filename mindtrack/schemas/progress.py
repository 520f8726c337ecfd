"""Weekly report and patient progress schemas."""

import datetime as dt

from pydantic import BaseModel

from mindtrack.schemas.journal import JournalEntryOut
from mindtrack.schemas.risk import RiskAlert, WeeklySummary


class WeekBucket(BaseModel):
    """ISO week a date belongs to, with its Monday and Sunday."""

    year: int
    week: int
    start_date: dt.date
    end_date: dt.date

    model_config = {"frozen": True}

    @property
    def week_key(self) -> str:
        return f"{self.year}-W{self.week:02d}"


class WeeklyReport(BaseModel):
    year: int
    week: int
    week_key: str
    start_date: dt.date
    end_date: dt.date
    entries_count: int
    avg_mood: float | None
    avg_anxiety: float | None
    avg_sleep: float | None
    avg_stress: float | None
    min_mood: int | None
    max_mood: int | None
    entries: list[JournalEntryOut]


class WeeklyMoodDelta(BaseModel):
    week_key: str
    avg_mood: float | None
    previous_week_key: str | None
    previous_avg_mood: float | None
    delta: float | None


class PatientOut(BaseModel):
    id: int
    name: str
    email: str
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class MoodPoint(BaseModel):
    date: dt.date
    mood: int | None
    anxiety: int | None
    sleep: float | None
    stress: int | None

    model_config = {"from_attributes": True}


class PatientProgressResponse(BaseModel):
    patient: PatientOut
    mood_data: list[MoodPoint]
    total_entries: int
    recent_entries: list[JournalEntryOut]
    weekly_reports: list[WeeklyReport]
    weekly_mood_deltas: list[WeeklyMoodDelta]


class RecentActivity(BaseModel):
    patient_id: int
    patient_name: str
    last_entry: JournalEntryOut | None


class DashboardResponse(BaseModel):
    total_patients: int
    crisis_alerts: list[RiskAlert]
    weekly_summary: WeeklySummary
    recent_activity: list[RecentActivity]
