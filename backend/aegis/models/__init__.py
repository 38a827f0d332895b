"""SQLAlchemy models."""

from __future__ import annotations

from aegis.models.admin import Admin
from aegis.models.hospital import Hospital
from aegis.models.patient import Patient
from aegis.models.user import User

__all__ = [
    "User",
    "Admin",
    "Hospital",
    "Patient",
]
