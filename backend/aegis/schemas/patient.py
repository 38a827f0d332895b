"""Patient profile schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field


class PatientProfileResponse(BaseModel):
    id: int
    user_id: int
    hospital_id: int | None
    phone_number: str | None
    gender: str | None
    date_of_birth: date | None
    address: str | None
    blood_group: str | None
    allergies: list[str]
    smoking_status: str
    diabetic: bool
    weight: float | None
    height: float | None
    caregiver_name: str | None
    caregiver_email: str | None
    caregiver_phone: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class PatientProfileUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    hospital_id: int | None = None
    phone_number: str | None = Field(default=None, min_length=7)
    gender: Literal["Male", "Female", "Other"] | None = None
    date_of_birth: date | None = None
    address: str | None = None
    blood_group: Literal["A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-"] | None = None
    allergies: list[str] | None = None
    smoking_status: Literal["never", "former", "current"] | None = None
    diabetic: bool | None = None
    weight: float | None = Field(default=None, gt=0, le=500)
    height: float | None = Field(default=None, gt=0, le=300)
    caregiver_name: str | None = None
    caregiver_email: EmailStr | None = None
    caregiver_phone: str | None = None
