import pytest
from fastapi.testclient import TestClient

from appointment_service.adapters.api import get_appointment_service
from appointment_service.domain.services.appointment_service import (
    AppointmentService,
)
from appointment_service.infrastructure.database.in_memory_appointment_repository import (
    InMemoryAppointmentRepository,
)
from appointment_service.infrastructure.database.in_memory_doctor_repository import (
    InMemoryDoctorRepository,
)
from appointment_service.main import app


@pytest.fixture
def appointment_repository():
    return InMemoryAppointmentRepository()


@pytest.fixture
def doctor_repository():
    return InMemoryDoctorRepository()


@pytest.fixture
def service(appointment_repository, doctor_repository):
    return AppointmentService(appointment_repository, doctor_repository)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_appointment_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_appointment():
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
        "timeSlot": "9:00 AM - 10:00 AM",
        "doctorName": "Dr. Smith",
    }
