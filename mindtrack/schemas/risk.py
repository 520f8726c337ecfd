"""Risk alert schemas."""

import datetime as dt

from pydantic import BaseModel, Field

from mindtrack.schemas.enums import AlertType, Severity
from mindtrack.schemas.journal import JournalEntryOut


class PatientRef(BaseModel):
    """Resolved patient identity handed to the aggregator."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class RiskAlert(BaseModel):
    patient_id: int
    patient_name: str
    severity: Severity
    alert_type: AlertType
    reasons: list[str]
    recent_low_mood_entry_count: int
    last_entry: JournalEntryOut
    generated_at: dt.datetime


class WeeklySummary(BaseModel):
    total_entries: int = 0
    avg_mood: float = 0
    patients_with_entries: int = 0
    entries_by_day: dict[str, int] = Field(default_factory=dict)


class RiskOverview(BaseModel):
    alerts: list[RiskAlert]
    weekly_summary: WeeklySummary
