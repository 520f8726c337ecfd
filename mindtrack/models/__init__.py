"""SQLAlchemy models."""

from __future__ import annotations

from mindtrack.models.journal_entry import JournalEntry
from mindtrack.models.patient import Patient

__all__ = [
    "JournalEntry",
    "Patient",
]
