"""Hospital service."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from aegis.models.hospital import Hospital


def list_active_hospitals(db: Session) -> list[Hospital]:
    """Active hospitals, sorted by name."""
    result = db.execute(
        select(Hospital).where(Hospital.is_active.is_(True)).order_by(Hospital.name.asc())
    )
    return list(result.scalars().all())
