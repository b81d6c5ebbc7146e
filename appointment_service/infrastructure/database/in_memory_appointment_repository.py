import logging
from typing import List, Optional

from appointment_service.common.dto import Appointment
from appointment_service.ports.appointment_repository import (
    AppointmentRepositoryPort,
)

logger = logging.getLogger(__name__)


class InMemoryAppointmentRepository(AppointmentRepositoryPort):
    """Process-local appointment store.

    Appointments are kept in insertion order. Ids come from a counter that
    only moves forward, so an id freed by a cancellation is never handed out
    again.
    """

    def __init__(self):
        self._appointments: List[Appointment] = []
        self._last_id = 0

    async def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    async def add_appointment(self, appointment: Appointment) -> Appointment:
        self._appointments.append(appointment)
        logger.info(f"Appointment stored: {appointment.id}")
        return appointment

    async def find_appointment(
        self, email: str, time_slot: Optional[str] = None
    ) -> Optional[Appointment]:
        return next(
            (
                appt
                for appt in self._appointments
                if appt.patient.email == email
                and (not time_slot or appt.time_slot == time_slot)
            ),
            None,
        )

    async def find_by_patient(self, email: str) -> List[Appointment]:
        return [
            appt for appt in self._appointments if appt.patient.email == email
        ]

    async def find_by_doctor(self, doctor_name: str) -> List[Appointment]:
        return [
            appt
            for appt in self._appointments
            if appt.doctor_name == doctor_name
        ]

    async def find_by_doctor_and_slot(
        self, doctor_name: str, time_slot: str
    ) -> Optional[Appointment]:
        return next(
            (
                appt
                for appt in self._appointments
                if appt.doctor_name == doctor_name
                and appt.time_slot == time_slot
            ),
            None,
        )

    async def update_time_slot(
        self, appointment_id: int, time_slot: str
    ) -> Optional[Appointment]:
        for appt in self._appointments:
            if appt.id == appointment_id:
                appt.time_slot = time_slot
                logger.info(
                    f"Appointment {appointment_id} moved to slot: {time_slot}"
                )
                return appt
        logger.info(f"Appointment not found for update: {appointment_id}")
        return None

    async def delete_appointment(self, appointment_id: int) -> bool:
        for index, appt in enumerate(self._appointments):
            if appt.id == appointment_id:
                del self._appointments[index]
                logger.info(f"Appointment deleted: {appointment_id}")
                return True
        logger.info(f"Appointment not found for deletion: {appointment_id}")
        return False

    async def clear(self) -> None:
        self._appointments.clear()
        self._last_id = 0
