"""Auth schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class RegisterRequest(BaseModel):
    """Patient sign-up. Next of kin becomes the SOS caregiver."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone_number: str = Field(..., min_length=7)
    password: str = Field(..., min_length=8)
    kin_name: str = Field(..., min_length=1)
    kin_phone: str = Field(..., min_length=7)
    kin_email: EmailStr | None = None
    hospital_id: int | None = None
    consent_health: Literal[True]
    consent_terms: Literal[True]

    @field_validator("first_name", "last_name", "kin_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("kin_email", mode="before")
    @classmethod
    def blank_kin_email(cls, v):
        return v or None


class AdminRegisterRequest(BaseModel):
    """Clinician sign-up. The hospital is matched by registration number or created."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)

    specialty: str = Field(..., min_length=1)
    license_number: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    job_title: str = Field(..., min_length=1)

    hospital_name: str = Field(..., min_length=1)
    hospital_address: str = Field(..., min_length=1)
    hospital_phone: str = Field(..., min_length=7)
    hospital_email: EmailStr
    registration_no: str = Field(..., min_length=1)

    @field_validator("email", "hospital_email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserMe(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    is_active: bool
    patient_id: int | None = None
    admin_id: int | None = None
    hospital_id: int | None = None
    created_at: datetime
