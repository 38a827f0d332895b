"""Emergency (SOS) policy constants."""

from __future__ import annotations

# Every SOS is high risk by definition; not derived from the risk score
RISK_LEVEL_AT_TRIGGER = "HIGH"

STATUS_PENDING = "PENDING"
STATUS_ACKNOWLEDGED = "ACKNOWLEDGED"
# Declared for clients, but no operation transitions into it yet
STATUS_RESOLVED = "RESOLVED"

EMERGENCY_STATUSES = (STATUS_PENDING, STATUS_ACKNOWLEDGED, STATUS_RESOLVED)

CHANNEL_CAREGIVER = "caregiver"
CHANNEL_CLINIC = "clinic"

NO_SYMPTOMS_TEXT = "none specified"

CAREGIVER_ALERT_TEMPLATE = (
    "🚨 EMERGENCY ALERT — {patient_name} at {time}.\n"
    "Reported symptoms: {symptoms}.\n"
    "Please respond immediately."
)

CLINIC_ALERT_TEMPLATE = (
    "🚨 EMERGENCY ALERT — Patient {patient_name} triggered an SOS at {time}.\n"
    "Reported symptoms: {symptoms}.\n"
    "Please contact the patient immediately."
)

# Shown to the caller after a trigger, in order
NEXT_STEPS = [
    "Contact emergency services immediately if symptoms are severe.",
    "Remain calm and wait for assistance.",
    "Keep the patient still and do not give them food or water.",
    "Note the time symptoms started. This is critical for stroke treatment.",
]
