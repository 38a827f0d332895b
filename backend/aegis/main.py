"""Aegis FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from aegis.api import admin, auth, emergency, health, hospitals, patient
from aegis.core.config import settings
from aegis.services.emergency_store import EmergencyStore

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# One tracker per process; handlers reach it through get_emergency_store
app.state.emergency_store = EmergencyStore()

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(hospitals.router)
app.include_router(patient.router)
app.include_router(emergency.router)
