"""Auth service."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from aegis.core.security import hash_password, verify_password
from aegis.models.admin import Admin
from aegis.models.hospital import Hospital
from aegis.models.patient import Patient
from aegis.models.user import User
from aegis.schemas.auth import AdminRegisterRequest, RegisterRequest, UserMe

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get user by email."""
    return db.execute(select(User).where(User.email == email.lower())).scalar_one_or_none()


def register_patient(db: Session, data: RegisterRequest) -> User:
    """Create a patient user and profile. Next of kin is stored as the caregiver."""
    if data.hospital_id is not None and not db.get(Hospital, data.hospital_id):
        raise ValueError("Hospital not found")

    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        hashed_password=hash_password(data.password),
        role="patient",
    )
    db.add(user)
    db.flush()

    patient = Patient(
        user_id=user.id,
        hospital_id=data.hospital_id,
        phone_number=data.phone_number,
        caregiver_name=data.kin_name,
        caregiver_phone=data.kin_phone,
        caregiver_email=data.kin_email,
        allergies=[],
        consent_health=data.consent_health,
        consent_terms=data.consent_terms,
    )
    db.add(patient)
    db.commit()
    db.refresh(user)
    logger.info("Patient registered: user=%s patient=%s", user.id, patient.id)
    return user


def register_admin(db: Session, data: AdminRegisterRequest) -> User:
    """Create an admin user, reusing the hospital with the same registration number if any."""
    hospital = db.execute(
        select(Hospital).where(Hospital.registration_no == data.registration_no)
    ).scalars().first()
    if not hospital:
        hospital = Hospital(
            name=data.hospital_name,
            address=data.hospital_address,
            phone=data.hospital_phone,
            email=data.hospital_email,
            registration_no=data.registration_no,
        )
        db.add(hospital)
        db.flush()

    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        hashed_password=hash_password(data.password),
        role="admin",
    )
    db.add(user)
    db.flush()

    admin = Admin(
        user_id=user.id,
        hospital_id=hospital.id,
        title=data.title,
        specialty=data.specialty,
        license_number=data.license_number,
        department=data.department,
        job_title=data.job_title,
        is_verified=False,
    )
    db.add(admin)
    db.commit()
    db.refresh(user)
    logger.info("Admin registered: user=%s admin=%s hospital=%s", user.id, admin.id, hospital.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate user by email and password."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    if not user.is_active:
        return None
    return user


def to_user_me(user: User) -> UserMe:
    """Caller profile with the role-specific ids resolved."""
    hospital_id = None
    if user.patient:
        hospital_id = user.patient.hospital_id
    elif user.admin:
        hospital_id = user.admin.hospital_id
    return UserMe(
        id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=user.role,
        is_active=user.is_active,
        patient_id=user.patient.id if user.patient else None,
        admin_id=user.admin.id if user.admin else None,
        hospital_id=hospital_id,
        created_at=user.created_at,
    )
