"""Patient profile service."""

from __future__ import annotations

from sqlalchemy.orm import Session

from aegis.models.hospital import Hospital
from aegis.models.patient import Patient
from aegis.schemas.patient import PatientProfileUpdate

# Columns that cannot be cleared; a null in the update is ignored
_NOT_NULL_FIELDS = ("smoking_status", "diabetic")


def update_profile(db: Session, patient: Patient, data: PatientProfileUpdate) -> Patient:
    """Apply the fields present in the update. Existing emergencies keep their snapshot."""
    changes = data.model_dump(exclude_unset=True)
    if changes.get("hospital_id") is not None and not db.get(Hospital, changes["hospital_id"]):
        raise ValueError("Hospital not found")
    if "allergies" in changes and changes["allergies"] is None:
        changes["allergies"] = []
    for key in _NOT_NULL_FIELDS:
        if key in changes and changes[key] is None:
            del changes[key]

    for key, value in changes.items():
        setattr(patient, key, value)
    db.commit()
    db.refresh(patient)
    return patient
