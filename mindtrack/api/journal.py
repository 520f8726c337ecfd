"""Journal entries API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from mindtrack.db.session import get_db
from mindtrack.schemas.journal import JournalEntryCreate, JournalEntryCreated, JournalEntryOut
from mindtrack.services.entry_classifier import classify_entry
from mindtrack.services.journal_service import append_entry, get_patient, list_entries_for_patient

router = APIRouter(prefix="/patients", tags=["journal"])


@router.post(
    "/{patient_id}/journal",
    response_model=JournalEntryCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_entry(
    patient_id: int,
    data: JournalEntryCreate,
    db: Session = Depends(get_db),
):
    """Create a journal entry and return it with its crisis flag."""
    try:
        entry = append_entry(db, patient_id, data)
    except ValueError as e:
        if "not found" in str(e).lower():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    stored = JournalEntryOut.model_validate(entry)
    return JournalEntryCreated(**stored.model_dump(), alert_flag=classify_entry(stored))


@router.get("/{patient_id}/journal", response_model=list[JournalEntryOut])
def list_entries(
    patient_id: int,
    db: Session = Depends(get_db),
):
    """List a patient's entries, oldest first."""
    if not get_patient(db, patient_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Patient not found")
    return list_entries_for_patient(db, patient_id)
