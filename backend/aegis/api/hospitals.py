"""Hospitals API."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from aegis.db.session import get_db
from aegis.schemas.hospital import HospitalResponse
from aegis.services.hospital_service import list_active_hospitals

router = APIRouter(prefix="/hospitals", tags=["hospitals"])


@router.get("", response_model=list[HospitalResponse])
def list_hospitals(db: Session = Depends(get_db)):
    """Active hospitals for the sign-up picker."""
    return list_active_hospitals(db)
