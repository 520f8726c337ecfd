"""Practitioner dashboard and patient progress API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from mindtrack.db.session import get_db
from mindtrack.schemas.journal import JournalEntryOut
from mindtrack.schemas.progress import (
    DashboardResponse,
    MoodPoint,
    PatientOut,
    PatientProgressResponse,
    RecentActivity,
)
from mindtrack.services.journal_service import (
    entries_by_patient,
    get_patient,
    list_entries_for_patient,
    list_patients_for_practitioner,
)
from mindtrack.services.risk_aggregator import aggregate_risk
from mindtrack.services.weekly_reports import build_weekly_reports, week_over_week_mood_deltas

router = APIRouter(prefix="/practitioners", tags=["practitioners"])
logger = logging.getLogger(__name__)

RECENT_ENTRIES_LIMIT = 7


@router.get("/{practitioner_id}/patients", response_model=list[PatientOut])
def list_patients(
    practitioner_id: int,
    db: Session = Depends(get_db),
):
    """Patients assigned to the practitioner."""
    return list_patients_for_practitioner(db, practitioner_id)


@router.get("/{practitioner_id}/dashboard", response_model=DashboardResponse)
def dashboard(
    practitioner_id: int,
    db: Session = Depends(get_db),
):
    """Crisis alerts, weekly summary and latest entry per patient. Recomputed on every call."""
    patients = list_patients_for_practitioner(db, practitioner_id)
    grouped = entries_by_patient(db, [p.id for p in patients])
    overview = aggregate_risk(practitioner_id, patients, grouped)

    recent_activity = [
        RecentActivity(
            patient_id=p.id,
            patient_name=p.name,
            last_entry=JournalEntryOut.model_validate(grouped[p.id][-1]) if grouped[p.id] else None,
        )
        for p in patients
    ]
    return DashboardResponse(
        total_patients=len(patients),
        crisis_alerts=overview.alerts,
        weekly_summary=overview.weekly_summary,
        recent_activity=recent_activity,
    )


@router.get(
    "/{practitioner_id}/patients/{patient_id}/progress",
    response_model=PatientProgressResponse,
)
def patient_progress(
    practitioner_id: int,
    patient_id: int,
    db: Session = Depends(get_db),
):
    """Full-history weekly reports and mood series for one of the practitioner's patients."""
    patient = get_patient(db, patient_id)
    if not patient or patient.practitioner_id != practitioner_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Patient not found")

    entries = list_entries_for_patient(db, patient_id)
    reports = build_weekly_reports(entries)
    logger.debug("progress_built patient_id=%s weeks=%d", patient_id, len(reports))
    return PatientProgressResponse(
        patient=PatientOut.model_validate(patient),
        mood_data=[MoodPoint.model_validate(e) for e in entries],
        total_entries=len(entries),
        recent_entries=[JournalEntryOut.model_validate(e) for e in entries[-RECENT_ENTRIES_LIMIT:]],
        weekly_reports=reports,
        weekly_mood_deltas=week_over_week_mood_deltas(reports),
    )
