"""Patient profile model."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aegis.db.base import Base

if TYPE_CHECKING:
    from aegis.models.hospital import Hospital
    from aegis.models.user import User


class Patient(Base):
    """Patient profile, including the caregiver and clinic links used for SOS fan-out."""

    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    hospital_id: Mapped[int | None] = mapped_column(ForeignKey("hospitals.id", ondelete="SET NULL"), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)  # Male | Female | Other
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    blood_group: Mapped[str | None] = mapped_column(String(3), nullable=True)
    allergies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    smoking_status: Mapped[str] = mapped_column(String(10), nullable=False, default="never")  # never | former | current
    diabetic: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # kg
    height: Mapped[float | None] = mapped_column(Float, nullable=True)  # cm
    caregiver_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    caregiver_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    caregiver_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    consent_health: Mapped[bool] = mapped_column(Boolean, nullable=False)
    consent_terms: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="patient")
    hospital: Mapped[Hospital | None] = relationship()
