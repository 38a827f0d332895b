"""Patient directory: resolves the details copied into an SOS record."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from aegis.models.patient import Patient

UNKNOWN_PATIENT_NAME = "Unknown Patient"


@dataclass
class PatientContact:
    """Patient, caregiver and clinic details as known right now."""

    patient_id: int
    patient_name: str
    patient_phone: str | None
    caregiver_name: str | None
    caregiver_phone: str | None
    clinic_name: str | None
    clinic_phone: str | None


def resolve_patient_contact(db: Session, patient_id: int) -> PatientContact | None:
    """Look up a patient with their caregiver and linked clinic. None if unknown."""
    patient = db.get(Patient, patient_id)
    if not patient:
        return None

    user = patient.user
    hospital = patient.hospital
    return PatientContact(
        patient_id=patient.id,
        patient_name=user.full_name if user else UNKNOWN_PATIENT_NAME,
        patient_phone=patient.phone_number,
        caregiver_name=patient.caregiver_name,
        caregiver_phone=patient.caregiver_phone,
        clinic_name=hospital.name if hospital else None,
        clinic_phone=hospital.phone if hospital else None,
    )


def list_hospital_patient_ids(db: Session, hospital_id: int) -> set[int]:
    """Ids of the patients linked to a hospital."""
    result = db.execute(select(Patient.id).where(Patient.hospital_id == hospital_id))
    return set(result.scalars().all())
