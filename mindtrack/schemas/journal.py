"""Journal entry schemas."""

import datetime as dt

from pydantic import BaseModel, Field

from mindtrack.schemas.enums import AlertFlag


class JournalEntryCreate(BaseModel):
    mood: int = Field(ge=0, le=10, description="Mood 0-10")
    anxiety: int | None = Field(default=None, ge=0, le=10, description="Anxiety 0-10")
    sleep: float | None = Field(default=None, ge=0, le=24, description="Hours slept")
    stress: int | None = Field(default=None, ge=0, le=10, description="Stress 0-10")
    text: str | None = Field(default=None, max_length=10000)
    emotions: list[str] = Field(default_factory=list, max_length=20)
    date: dt.date | None = Field(default=None, description="Defaults to today (UTC)")


class JournalEntryOut(BaseModel):
    """A stored entry as the engine sees it.

    Scores are not range-checked here: rows already in storage are read
    back as-is and the engine decides what to do with malformed values.
    """

    id: int | None = None
    patient_id: int
    date: dt.date
    mood: int | None = None
    anxiety: int | None = None
    sleep: float | None = None
    stress: int | None = None
    text: str | None = None
    emotions: list[str] = Field(default_factory=list)
    created_at: dt.datetime | None = None

    model_config = {"from_attributes": True}


class JournalEntryCreated(JournalEntryOut):
    """Creation response: the stored entry plus the advisory crisis flag."""

    alert_flag: AlertFlag
