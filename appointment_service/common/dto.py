from typing import List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

CAMEL_CASE_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class Doctor(BaseModel):
    name: str
    slots: List[str]

    model_config = {"frozen": True}


class Patient(BaseModel):
    first_name: str
    last_name: str
    email: str

    model_config = CAMEL_CASE_CONFIG


class Appointment(BaseModel):
    id: int
    patient: Patient
    doctor_name: str
    time_slot: str

    model_config = {
        **CAMEL_CASE_CONFIG,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "patient": {
                        "firstName": "John",
                        "lastName": "Doe",
                        "email": "john@example.com",
                    },
                    "doctorName": "Dr. Smith",
                    "timeSlot": "9:00 AM - 10:00 AM",
                }
            ]
        },
    }


class AppointmentCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    time_slot: Optional[str] = None
    doctor_name: Optional[str] = None

    model_config = CAMEL_CASE_CONFIG


class AppointmentCancel(BaseModel):
    email: Optional[str] = None
    time_slot: Optional[str] = None

    model_config = CAMEL_CASE_CONFIG


class AppointmentUpdate(BaseModel):
    email: Optional[str] = None
    original_time_slot: Optional[str] = None
    new_time_slot: Optional[str] = None

    model_config = CAMEL_CASE_CONFIG


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
