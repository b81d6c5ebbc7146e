from abc import ABC, abstractmethod
from typing import List, Optional

from appointment_service.common.dto import Appointment


class AppointmentRepositoryPort(ABC):
    @abstractmethod
    async def next_id(self) -> int:
        pass

    @abstractmethod
    async def add_appointment(self, appointment: Appointment) -> Appointment:
        pass

    @abstractmethod
    async def find_appointment(
        self, email: str, time_slot: Optional[str] = None
    ) -> Optional[Appointment]:
        pass

    @abstractmethod
    async def find_by_patient(self, email: str) -> List[Appointment]:
        pass

    @abstractmethod
    async def find_by_doctor(self, doctor_name: str) -> List[Appointment]:
        pass

    @abstractmethod
    async def find_by_doctor_and_slot(
        self, doctor_name: str, time_slot: str
    ) -> Optional[Appointment]:
        pass

    @abstractmethod
    async def update_time_slot(
        self, appointment_id: int, time_slot: str
    ) -> Optional[Appointment]:
        pass

    @abstractmethod
    async def delete_appointment(self, appointment_id: int) -> bool:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass
