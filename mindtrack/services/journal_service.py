"""Journal entry and patient store."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from mindtrack.models.journal_entry import JournalEntry
from mindtrack.models.patient import Patient
from mindtrack.schemas.journal import JournalEntryCreate


def get_patient(db: Session, patient_id: int) -> Patient | None:
    """Get patient by id."""
    return db.get(Patient, patient_id)


def list_patients_for_practitioner(db: Session, practitioner_id: int) -> list[Patient]:
    """Patients currently assigned to a practitioner, ordered by name."""
    stmt = (
        select(Patient)
        .where(Patient.practitioner_id == practitioner_id)
        .order_by(Patient.name, Patient.id)
    )
    return list(db.execute(stmt).scalars().all())


def list_entries_for_patient(db: Session, patient_id: int) -> list[JournalEntry]:
    """All entries for a patient, oldest first."""
    stmt = (
        select(JournalEntry)
        .where(JournalEntry.patient_id == patient_id)
        .order_by(JournalEntry.date, JournalEntry.created_at, JournalEntry.id)
    )
    return list(db.execute(stmt).scalars().all())


def entries_by_patient(db: Session, patient_ids: Iterable[int]) -> dict[int, list[JournalEntry]]:
    """Entries for several patients in one query, keyed by patient id."""
    ids = list(patient_ids)
    grouped: dict[int, list[JournalEntry]] = {pid: [] for pid in ids}
    if not ids:
        return grouped
    stmt = (
        select(JournalEntry)
        .where(JournalEntry.patient_id.in_(ids))
        .order_by(JournalEntry.date, JournalEntry.created_at, JournalEntry.id)
    )
    for entry in db.execute(stmt).scalars().all():
        grouped[entry.patient_id].append(entry)
    return grouped


def append_entry(db: Session, patient_id: int, data: JournalEntryCreate) -> JournalEntry:
    """Store a new entry exactly as submitted."""
    if not get_patient(db, patient_id):
        raise ValueError("Patient not found")

    entry = JournalEntry(
        patient_id=patient_id,
        date=data.date or datetime.now(timezone.utc).date(),
        mood=data.mood,
        anxiety=data.anxiety,
        sleep=data.sleep,
        stress=data.stress,
        text=data.text,
        emotions=data.emotions,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry
