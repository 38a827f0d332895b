"""Emergency (SOS) API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from aegis.core.deps import get_current_user, get_emergency_store, require_admin
from aegis.core.emergency_policies import EMERGENCY_STATUSES, NEXT_STEPS, STATUS_ACKNOWLEDGED
from aegis.db.session import get_db
from aegis.models.user import User
from aegis.schemas.emergency import (
    EmergencyAcknowledgeResponse,
    EmergencyListResponse,
    EmergencyResponse,
    EmergencyTriggerRequest,
    EmergencyTriggerResponse,
)
from aegis.services.emergency_store import EmergencyCreate, EmergencyRecord, EmergencyStore
from aegis.services.patient_directory import resolve_patient_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/emergency", tags=["emergency"])


def _caller_patient_id(user: User) -> int | None:
    return user.patient.id if user.role == "patient" and user.patient else None


def _is_admin(user: User) -> bool:
    """Admin role with an admin profile, same rule as require_admin."""
    return user.role == "admin" and user.admin is not None


def _acknowledged_by(user: User) -> str:
    """Audit identity: which kind of caller acknowledged, and their profile id."""
    if _is_admin(user):
        return f"admin:{user.admin.id}"
    return f"patient:{_caller_patient_id(user)}"


def _get_accessible(store: EmergencyStore, emergency_id: str, user: User) -> EmergencyRecord:
    """Fetch an emergency the caller may see. Patients only see their own."""
    emergency = store.get_by_id(emergency_id)
    if not emergency:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Emergency not found")
    if not _is_admin(user) and _caller_patient_id(user) != emergency.patient_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied.")
    return emergency


def _dispatch_summary(caregiver_name: str | None, clinic_name: str | None) -> str:
    recipients = []
    if caregiver_name:
        recipients.append(f"caregiver ({caregiver_name})")
    if clinic_name:
        recipients.append(f"clinic ({clinic_name})")
    if not recipients:
        return "Emergency recorded. No caregiver or clinic is currently linked to your account."
    return f"Emergency alert sent to {' and '.join(recipients)}."


@router.post("/trigger", response_model=EmergencyTriggerResponse, status_code=status.HTTP_201_CREATED)
def trigger(
    data: EmergencyTriggerRequest,
    db: Session = Depends(get_db),
    store: EmergencyStore = Depends(get_emergency_store),
    current_user: User = Depends(get_current_user),
):
    """Raise an SOS for a patient and notify their caregiver and clinic."""
    if not _is_admin(current_user) and _caller_patient_id(current_user) != data.patient_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only trigger an SOS for your own account.",
        )

    contact = resolve_patient_contact(db, data.patient_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Patient not found")

    emergency = store.create(
        EmergencyCreate(
            patient_id=contact.patient_id,
            patient_name=contact.patient_name,
            patient_phone=contact.patient_phone,
            reported_symptoms=data.symptoms,
            message=data.message,
            caregiver_name=contact.caregiver_name,
            caregiver_phone=contact.caregiver_phone,
            clinic_name=contact.clinic_name,
            clinic_phone=contact.clinic_phone,
        )
    )
    summary = _dispatch_summary(contact.caregiver_name, contact.clinic_name)
    logger.info("SOS %s for patient %s: %s", emergency.id, contact.patient_id, summary)
    return EmergencyTriggerResponse(
        emergency_id=emergency.id,
        message=summary,
        triggered_at=emergency.triggered_at,
        next_steps=list(NEXT_STEPS),
    )


@router.get("", response_model=EmergencyListResponse)
def list_emergencies(
    status_filter: str | None = Query(default=None, alias="status"),
    store: EmergencyStore = Depends(get_emergency_store),
    current_user: User = Depends(require_admin),
):
    """All emergencies, newest first, optionally filtered by status. Admin only."""
    emergencies = store.get_all()
    if status_filter:
        wanted = status_filter.upper()
        if wanted not in EMERGENCY_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid status. Expected one of: {', '.join(EMERGENCY_STATUSES)}",
            )
        emergencies = [e for e in emergencies if e.status == wanted]
    return EmergencyListResponse(
        emergencies=[EmergencyResponse.model_validate(e) for e in emergencies],
        total=len(emergencies),
    )


@router.get("/{emergency_id}", response_model=EmergencyResponse)
def get_emergency(
    emergency_id: str,
    store: EmergencyStore = Depends(get_emergency_store),
    current_user: User = Depends(get_current_user),
):
    """Get an emergency. Patients can only view their own."""
    return EmergencyResponse.model_validate(_get_accessible(store, emergency_id, current_user))


@router.post("/{emergency_id}/acknowledge", response_model=EmergencyAcknowledgeResponse)
def acknowledge(
    emergency_id: str,
    store: EmergencyStore = Depends(get_emergency_store),
    current_user: User = Depends(get_current_user),
):
    """Acknowledge an emergency. Admins can acknowledge any; patients their own."""
    emergency = _get_accessible(store, emergency_id, current_user)
    if emergency.status == STATUS_ACKNOWLEDGED:
        return EmergencyAcknowledgeResponse(
            message="Emergency was already acknowledged.",
            emergency=EmergencyResponse.model_validate(emergency),
        )

    updated = store.acknowledge(emergency_id, _acknowledged_by(current_user))
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Emergency not found")
    return EmergencyAcknowledgeResponse(
        message="Emergency acknowledged successfully.",
        emergency=EmergencyResponse.model_validate(updated),
    )
