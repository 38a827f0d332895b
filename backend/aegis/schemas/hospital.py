"""Hospital schemas."""

from pydantic import BaseModel


class HospitalResponse(BaseModel):
    id: int
    name: str
    address: str
    phone: str
    email: str

    model_config = {"from_attributes": True}
