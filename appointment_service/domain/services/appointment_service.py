import asyncio
import logging
import re
from typing import List, Optional

from appointment_service.common.dto import (
    Appointment,
    AppointmentCancel,
    AppointmentCreate,
    AppointmentUpdate,
    Doctor,
    Patient,
)
from appointment_service.domain.exceptions import (
    AppointmentNotFoundException,
    DoctorNotFoundException,
    InvalidAppointmentException,
    SlotAlreadyBookedException,
)
from appointment_service.ports.appointment_repository import (
    AppointmentRepositoryPort,
)
from appointment_service.ports.doctor_repository import DoctorRepositoryPort

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and EMAIL_PATTERN.search(email) is not None


class AppointmentService:
    """Books, lists, cancels and reschedules appointments.

    Writes go through ``self.lock`` so the slot check and the insert or
    update it guards see the same snapshot of the store.
    """

    def __init__(
        self,
        repository: AppointmentRepositoryPort,
        doctors: DoctorRepositoryPort,
    ):
        self.repository = repository
        self.doctors = doctors
        self.lock = asyncio.Lock()

    async def _get_doctor(self, doctor_name: str) -> Doctor:
        doctor = await self.doctors.get_doctor(doctor_name)
        if doctor is None:
            logger.warning(f"Doctor not found: {doctor_name}")
            raise DoctorNotFoundException
        return doctor

    async def book_appointment(
        self, appointment: AppointmentCreate
    ) -> Appointment:
        fields = (
            appointment.first_name,
            appointment.last_name,
            appointment.email,
            appointment.time_slot,
            appointment.doctor_name,
        )
        if not all(fields):
            raise InvalidAppointmentException("All fields are required")
        if not is_valid_email(appointment.email):
            raise InvalidAppointmentException("Invalid email format")

        doctor = await self._get_doctor(appointment.doctor_name)
        if appointment.time_slot not in doctor.slots:
            logger.warning(
                f"Slot {appointment.time_slot} is not offered by {doctor.name}"
            )
            raise InvalidAppointmentException(
                "Invalid or unavailable time slot"
            )

        async with self.lock:
            existing = await self.repository.find_by_doctor_and_slot(
                doctor.name, appointment.time_slot
            )
            if existing is not None:
                logger.warning(
                    f"Slot {appointment.time_slot} with {doctor.name} is already booked"
                )
                raise SlotAlreadyBookedException("Time slot already booked")

            created = Appointment(
                id=await self.repository.next_id(),
                patient=Patient(
                    first_name=appointment.first_name,
                    last_name=appointment.last_name,
                    email=appointment.email,
                ),
                doctor_name=doctor.name,
                time_slot=appointment.time_slot,
            )
            await self.repository.add_appointment(created)

        logger.info(f"Appointment booked: {created.id}")
        return created

    async def get_patient_appointments(self, email: str) -> List[Appointment]:
        if not is_valid_email(email):
            raise InvalidAppointmentException("Invalid email format")
        appointments = await self.repository.find_by_patient(email)
        if not appointments:
            raise AppointmentNotFoundException("No appointments found")
        logger.info(
            f"Retrieved {len(appointments)} appointments for patient: {email}"
        )
        return appointments

    async def get_doctor_appointments(
        self, doctor_name: str
    ) -> List[Appointment]:
        doctor = await self._get_doctor(doctor_name)
        appointments = await self.repository.find_by_doctor(doctor.name)
        logger.info(
            f"Retrieved {len(appointments)} appointments for doctor: {doctor.name}"
        )
        return appointments

    async def cancel_appointment(self, cancel: AppointmentCancel) -> dict:
        if not cancel.email or not cancel.time_slot:
            raise InvalidAppointmentException(
                "Email and time slot are required"
            )

        async with self.lock:
            appointment = await self.repository.find_appointment(
                cancel.email, cancel.time_slot
            )
            if appointment is None:
                raise AppointmentNotFoundException("Appointment not found")
            if not await self.repository.delete_appointment(appointment.id):
                raise AppointmentNotFoundException("Appointment not found")

        logger.info(f"Appointment cancelled: {appointment.id}")
        return {"message": "Appointment cancelled successfully"}

    async def modify_appointment(self, update: AppointmentUpdate) -> Appointment:
        if not (
            update.email and update.original_time_slot and update.new_time_slot
        ):
            raise InvalidAppointmentException("All fields are required")

        async with self.lock:
            appointment = await self.repository.find_appointment(
                update.email, update.original_time_slot
            )
            if appointment is None:
                raise AppointmentNotFoundException(
                    "Original appointment not found"
                )

            doctor = await self._get_doctor(appointment.doctor_name)
            if update.new_time_slot not in doctor.slots:
                raise InvalidAppointmentException(
                    "Invalid or unavailable new time slot"
                )

            holder = await self.repository.find_by_doctor_and_slot(
                doctor.name, update.new_time_slot
            )
            # Rescheduling onto the slot it already holds is a no-op.
            if holder is not None and holder.id != appointment.id:
                logger.warning(
                    f"Slot {update.new_time_slot} with {doctor.name} is already booked"
                )
                raise SlotAlreadyBookedException(
                    "New time slot is already booked"
                )

            updated = await self.repository.update_time_slot(
                appointment.id, update.new_time_slot
            )
            if updated is None:
                raise AppointmentNotFoundException(
                    "Original appointment not found"
                )

        logger.info(
            f"Appointment {updated.id} rescheduled to {updated.time_slot}"
        )
        return updated
