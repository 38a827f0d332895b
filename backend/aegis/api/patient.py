"""Patient profile API."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from aegis.core.deps import require_patient
from aegis.db.session import get_db
from aegis.models.user import User
from aegis.schemas.patient import PatientProfileResponse, PatientProfileUpdate
from aegis.services.patient_service import update_profile

router = APIRouter(prefix="/patient", tags=["patient"])


@router.get("/profile", response_model=PatientProfileResponse)
def get_profile(current_user: User = Depends(require_patient)):
    """Current patient's profile."""
    return current_user.patient


@router.put("/profile", response_model=PatientProfileResponse)
def put_profile(
    data: PatientProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_patient),
):
    """Update current patient's profile."""
    try:
        return update_profile(db, current_user.patient, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
