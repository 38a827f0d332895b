"""Admin account and hospital dashboard endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from aegis.core.deps import get_emergency_store, require_admin
from aegis.core.emergency_policies import STATUS_PENDING
from aegis.db.session import get_db
from aegis.models.user import User
from aegis.schemas.auth import AdminRegisterRequest, UserMe
from aegis.schemas.emergency import EmergencyListResponse, EmergencyResponse
from aegis.services.auth_service import get_user_by_email, register_admin, to_user_me
from aegis.services.emergency_store import EmergencyStore
from aegis.services.patient_directory import list_hospital_patient_ids

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/register", response_model=UserMe, status_code=status.HTTP_201_CREATED)
def register(
    data: AdminRegisterRequest,
    db: Session = Depends(get_db),
):
    """Register a clinician. Creates the hospital on first use of its registration number."""
    if get_user_by_email(db, data.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists",
        )
    user = register_admin(db, data)
    return to_user_me(user)


@router.get("/emergencies/open", response_model=EmergencyListResponse)
def open_emergencies(
    db: Session = Depends(get_db),
    store: EmergencyStore = Depends(get_emergency_store),
    current_user: User = Depends(require_admin),
):
    """PENDING emergencies of patients linked to the admin's hospital, newest first."""
    hospital_id = current_user.admin.hospital_id
    if hospital_id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Your admin account is not linked to a hospital.",
        )

    patient_ids = list_hospital_patient_ids(db, hospital_id)
    emergencies = [
        e for e in store.get_all()
        if e.status == STATUS_PENDING and e.patient_id in patient_ids
    ]
    return EmergencyListResponse(
        emergencies=[EmergencyResponse.model_validate(e) for e in emergencies],
        total=len(emergencies),
    )
