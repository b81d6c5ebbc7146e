from typing import Iterable, Optional

from appointment_service.common.dto import Doctor
from appointment_service.ports.doctor_repository import DoctorRepositoryPort

DEFAULT_DOCTORS = [
    Doctor(
        name="Dr. Smith",
        slots=["9:00 AM - 10:00 AM", "10:00 AM - 11:00 AM", "2:00 PM - 3:00 PM"],
    ),
    Doctor(
        name="Dr. Johnson",
        slots=["11:00 AM - 12:00 PM", "1:00 PM - 2:00 PM", "3:00 PM - 4:00 PM"],
    ),
]


class InMemoryDoctorRepository(DoctorRepositoryPort):
    def __init__(self, doctors: Optional[Iterable[Doctor]] = None):
        catalog = DEFAULT_DOCTORS if doctors is None else doctors
        self._doctors = {doctor.name: doctor for doctor in catalog}

    async def get_doctor(self, name: str) -> Optional[Doctor]:
        return self._doctors.get(name)
