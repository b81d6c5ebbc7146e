import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from appointment_service.common.dto import (
    Appointment,
    AppointmentCancel,
    AppointmentCreate,
    AppointmentUpdate,
    ErrorResponse,
    MessageResponse,
)
from appointment_service.domain.exceptions import (
    AppointmentNotFoundException,
    AppointmentServiceException,
    InvalidAppointmentException,
    SlotAlreadyBookedException,
)
from appointment_service.domain.services.appointment_service import (
    AppointmentService,
)
from appointment_service.infrastructure.database.in_memory_appointment_repository import (
    InMemoryAppointmentRepository,
)
from appointment_service.infrastructure.database.in_memory_doctor_repository import (
    InMemoryDoctorRepository,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["appointments"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@lru_cache
def get_appointment_repository():
    return InMemoryAppointmentRepository()


@lru_cache
def get_doctor_repository():
    return InMemoryDoctorRepository()


@lru_cache
def get_appointment_service():
    return AppointmentService(
        get_appointment_repository(), get_doctor_repository()
    )


def to_http_exception(error: AppointmentServiceException) -> HTTPException:
    if isinstance(error, AppointmentNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(
        error, (InvalidAppointmentException, SlotAlreadyBookedException)
    ):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=error.message)


@router.post(
    "",
    response_model=Appointment,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def book_appointment(
    appointment: Optional[AppointmentCreate] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info("Received request to book appointment")
    try:
        return await service.book_appointment(
            appointment or AppointmentCreate()
        )
    except AppointmentServiceException as e:
        logger.warning(f"Failed to book appointment. Reason: {e.message}")
        raise to_http_exception(e)


@router.get(
    "/patient/{email}",
    response_model=List[Appointment],
    responses=ERROR_RESPONSES,
)
async def get_patient_appointments(
    email: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info(f"Received request to get appointments for patient: {email}")
    try:
        return await service.get_patient_appointments(email)
    except AppointmentServiceException as e:
        logger.warning(
            f"Failed to get appointments for patient {email}. Reason: {e.message}"
        )
        raise to_http_exception(e)


@router.get(
    "/doctor/{doctor_name}",
    response_model=List[Appointment],
    responses={404: {"model": ErrorResponse}},
)
async def get_doctor_appointments(
    doctor_name: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info(
        f"Received request to get appointments for doctor: {doctor_name}"
    )
    try:
        return await service.get_doctor_appointments(doctor_name)
    except AppointmentServiceException as e:
        logger.warning(
            f"Failed to get appointments for doctor {doctor_name}. Reason: {e.message}"
        )
        raise to_http_exception(e)


@router.delete("", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def cancel_appointment(
    cancel: Optional[AppointmentCancel] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info("Received request to cancel appointment")
    try:
        return await service.cancel_appointment(
            cancel or AppointmentCancel()
        )
    except AppointmentServiceException as e:
        logger.warning(f"Failed to cancel appointment. Reason: {e.message}")
        raise to_http_exception(e)


@router.put("", response_model=Appointment, responses=ERROR_RESPONSES)
async def modify_appointment(
    update: Optional[AppointmentUpdate] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info("Received request to modify appointment")
    try:
        return await service.modify_appointment(
            update or AppointmentUpdate()
        )
    except AppointmentServiceException as e:
        logger.warning(f"Failed to modify appointment. Reason: {e.message}")
        raise to_http_exception(e)
