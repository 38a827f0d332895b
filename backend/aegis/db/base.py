"""SQLAlchemy declarative base for the patient directory tables."""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for users, patients, admins and hospitals."""
