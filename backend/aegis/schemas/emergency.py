"""Emergency (SOS) schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class EmergencyTriggerRequest(BaseModel):
    patient_id: int
    symptoms: list[str] = Field(default_factory=list)
    message: str = ""


class EmergencyTriggerResponse(BaseModel):
    emergency_id: str
    message: str
    triggered_at: datetime
    next_steps: list[str]


class EmergencyNotificationResponse(BaseModel):
    id: str
    emergency_id: str
    type: Literal["caregiver", "clinic"]
    recipient: str
    contact: str
    message: str
    sent_at: datetime
    read: bool

    model_config = {"from_attributes": True}


class EmergencyResponse(BaseModel):
    id: str
    patient_id: int
    patient_name: str
    patient_phone: str | None
    triggered_at: datetime
    reported_symptoms: list[str]
    message: str
    risk_level_at_trigger: Literal["HIGH"]
    status: Literal["PENDING", "ACKNOWLEDGED", "RESOLVED"]
    caregiver_name: str | None
    caregiver_phone: str | None
    clinic_name: str | None
    acknowledged_by: str | None
    acknowledged_at: datetime | None
    notifications: list[EmergencyNotificationResponse] = []

    model_config = {"from_attributes": True}


class EmergencyListResponse(BaseModel):
    emergencies: list[EmergencyResponse]
    total: int


class EmergencyAcknowledgeResponse(BaseModel):
    message: str
    emergency: EmergencyResponse
