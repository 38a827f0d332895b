"""Seed reference data into an already-migrated database.

The schema is owned by Alembic; run ``alembic upgrade head`` from backend/
first, then: python -m aegis.db.init_db
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from aegis.core.config import settings
from aegis.db.session import SessionLocal
from aegis.models import Hospital

logger = logging.getLogger(__name__)

DEFAULT_HOSPITALS = [
    {
        "name": "Lagos University Teaching Hospital",
        "address": "Ishaga Road, Idi-Araba, Surulere, Lagos",
        "phone": "+234-1-7747200",
        "email": "info@luth.gov.ng",
        "registration_no": "LUTH-001",
    },
    {
        "name": "University College Hospital Ibadan",
        "address": "Queen Elizabeth Road, Oritamefa, Ibadan",
        "phone": "+234-2-2410088",
        "email": "info@uch-ibadan.org.ng",
        "registration_no": "UCH-002",
    },
    {
        "name": "National Hospital Abuja",
        "address": "Plot 132 Central District, Garki, Abuja",
        "phone": "+234-9-2341100",
        "email": "info@nationalhospital.gov.ng",
        "registration_no": "NHA-003",
    },
    {
        "name": "Lagos State University Teaching Hospital",
        "address": "1-5 Oba Akinjobi Way, Ikeja, Lagos",
        "phone": "+234-1-4939046",
        "email": "info@lasuth.org.ng",
        "registration_no": "LASUTH-004",
    },
]


def seed_hospitals(db: Session) -> int:
    """Insert default hospitals that are missing (matched by name). Returns count added."""
    existing = set(db.execute(select(Hospital.name)).scalars().all())
    added = 0
    for data in DEFAULT_HOSPITALS:
        if data["name"] in existing:
            continue
        db.add(Hospital(**data))
        added += 1
    db.commit()
    return added


def init_db() -> None:
    """Seed hospitals if enabled."""
    if not settings.seed_hospitals:
        return
    db = SessionLocal()
    try:
        added = seed_hospitals(db)
        logger.info("Seeded %s hospital(s)", added)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    init_db()
