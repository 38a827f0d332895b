"""In-memory emergency (SOS) dispatch tracker.

Holds every emergency raised since process start. Records are never deleted
and nothing is persisted; a restart loses the history.

All operations take the store lock and hand out deep copies, so a caller can
neither see a record half-way through an acknowledgement nor mutate the
stored records through a returned object.
"""

from __future__ import annotations

import copy
import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from aegis.core.emergency_policies import (
    CAREGIVER_ALERT_TEMPLATE,
    CHANNEL_CAREGIVER,
    CHANNEL_CLINIC,
    CLINIC_ALERT_TEMPLATE,
    NO_SYMPTOMS_TEXT,
    RISK_LEVEL_AT_TRIGGER,
    STATUS_ACKNOWLEDGED,
    STATUS_PENDING,
)

logger = logging.getLogger(__name__)


@dataclass
class EmergencyNotification:
    """Simulated outbound alert for one recipient channel."""

    id: str
    emergency_id: str
    type: str  # caregiver | clinic
    recipient: str
    contact: str
    message: str
    sent_at: datetime
    read: bool = False


@dataclass
class EmergencyRecord:
    """One SOS event. Patient, caregiver and clinic fields are snapshots taken at trigger time."""

    id: str
    patient_id: int
    patient_name: str
    triggered_at: datetime
    reported_symptoms: list[str]
    message: str
    patient_phone: str | None = None
    risk_level_at_trigger: str = RISK_LEVEL_AT_TRIGGER
    status: str = STATUS_PENDING  # PENDING | ACKNOWLEDGED | RESOLVED
    caregiver_name: str | None = None
    caregiver_phone: str | None = None
    clinic_name: str | None = None
    acknowledged_by: str | None = None
    acknowledged_at: datetime | None = None
    notifications: list[EmergencyNotification] = field(default_factory=list)


@dataclass
class EmergencyCreate:
    """Input for EmergencyStore.create."""

    patient_id: int
    patient_name: str
    patient_phone: str | None = None
    reported_symptoms: list[str] = field(default_factory=list)
    message: str = ""
    caregiver_name: str | None = None
    caregiver_phone: str | None = None
    clinic_name: str | None = None
    clinic_phone: str | None = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def format_alert_time(moment: datetime) -> str:
    """Render a trigger time as server-local 24-hour HH:MM."""
    return moment.astimezone().strftime("%H:%M")


def summarize_symptoms(symptoms: list[str]) -> str:
    """Comma-joined symptoms, or a placeholder when none were reported."""
    return ", ".join(symptoms) if symptoms else NO_SYMPTOMS_TEXT


class EmergencyStore:
    """Process-wide registry of emergency records.

    ``clock`` must return timezone-aware datetimes; ``id_factory`` must
    return ids unique for the lifetime of the store.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._records: list[EmergencyRecord] = []
        self._lock = threading.Lock()

    def create(self, data: EmergencyCreate) -> EmergencyRecord:
        """Record a new SOS and build one notification per linked channel."""
        with self._lock:
            emergency_id = self._id_factory()
            triggered_at = self._clock()
            time_text = format_alert_time(triggered_at)
            symptom_text = summarize_symptoms(data.reported_symptoms)

            notifications: list[EmergencyNotification] = []
            if data.caregiver_name:
                notifications.append(
                    EmergencyNotification(
                        id=self._id_factory(),
                        emergency_id=emergency_id,
                        type=CHANNEL_CAREGIVER,
                        recipient=data.caregiver_name,
                        contact=data.caregiver_phone or "",
                        message=CAREGIVER_ALERT_TEMPLATE.format(
                            patient_name=data.patient_name,
                            time=time_text,
                            symptoms=symptom_text,
                        ),
                        sent_at=triggered_at,
                    )
                )
            if data.clinic_name:
                notifications.append(
                    EmergencyNotification(
                        id=self._id_factory(),
                        emergency_id=emergency_id,
                        type=CHANNEL_CLINIC,
                        recipient=data.clinic_name,
                        contact=data.clinic_phone or "",
                        message=CLINIC_ALERT_TEMPLATE.format(
                            patient_name=data.patient_name,
                            time=time_text,
                            symptoms=symptom_text,
                        ),
                        sent_at=triggered_at,
                    )
                )

            record = EmergencyRecord(
                id=emergency_id,
                patient_id=data.patient_id,
                patient_name=data.patient_name,
                patient_phone=data.patient_phone,
                triggered_at=triggered_at,
                reported_symptoms=list(data.reported_symptoms),
                message=data.message,
                caregiver_name=data.caregiver_name,
                caregiver_phone=data.caregiver_phone,
                clinic_name=data.clinic_name,
                notifications=notifications,
            )
            self._records.append(record)
            logger.info(
                "Emergency created: id=%s patient=%s notifications=%s",
                emergency_id,
                data.patient_id,
                len(notifications),
            )
            return copy.deepcopy(record)

    def get_by_id(self, emergency_id: str) -> EmergencyRecord | None:
        """Get emergency by id, or None."""
        with self._lock:
            record = self._find(emergency_id)
            return copy.deepcopy(record) if record else None

    def get_all(self) -> list[EmergencyRecord]:
        """All emergencies, newest first."""
        with self._lock:
            # reversed + stable sort keeps the later-created record first on equal timestamps
            ordered = sorted(reversed(self._records), key=lambda r: r.triggered_at, reverse=True)
            return copy.deepcopy(ordered)

    def acknowledge(self, emergency_id: str, acknowledged_by: str) -> EmergencyRecord | None:
        """Mark an emergency ACKNOWLEDGED and all its notifications read.

        Does not guard against re-acknowledgement: a second call overwrites
        ``acknowledged_by`` and ``acknowledged_at``.
        """
        with self._lock:
            record = self._find(emergency_id)
            if not record:
                return None
            record.status = STATUS_ACKNOWLEDGED
            record.acknowledged_by = acknowledged_by
            record.acknowledged_at = self._clock()
            for notification in record.notifications:
                notification.read = True
            logger.info("Emergency acknowledged: id=%s by=%s", emergency_id, acknowledged_by)
            return copy.deepcopy(record)

    def _find(self, emergency_id: str) -> EmergencyRecord | None:
        for record in self._records:
            if record.id == emergency_id:
                return record
        return None
