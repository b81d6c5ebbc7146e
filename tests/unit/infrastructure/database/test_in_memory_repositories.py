import pytest

from appointment_service.common.dto import Appointment, Doctor, Patient
from appointment_service.infrastructure.database.in_memory_doctor_repository import (
    DEFAULT_DOCTORS,
    InMemoryDoctorRepository,
)


def make_appointment(id, email, doctor_name, time_slot):
    return Appointment(
        id=id,
        patient=Patient(first_name="Test", last_name="Patient", email=email),
        doctor_name=doctor_name,
        time_slot=time_slot,
    )


@pytest.mark.asyncio
async def test_next_id_is_sequential(appointment_repository):
    assert await appointment_repository.next_id() == 1
    assert await appointment_repository.next_id() == 2


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(appointment_repository):
    first = make_appointment(
        await appointment_repository.next_id(),
        "a@example.com",
        "Dr. Smith",
        "9:00 AM - 10:00 AM",
    )
    await appointment_repository.add_appointment(first)
    assert await appointment_repository.delete_appointment(first.id)
    assert await appointment_repository.next_id() == 2


@pytest.mark.asyncio
async def test_find_by_patient_keeps_insertion_order(appointment_repository):
    await appointment_repository.add_appointment(
        make_appointment(1, "a@example.com", "Dr. Smith", "2:00 PM - 3:00 PM")
    )
    await appointment_repository.add_appointment(
        make_appointment(2, "b@example.com", "Dr. Smith", "9:00 AM - 10:00 AM")
    )
    await appointment_repository.add_appointment(
        make_appointment(
            3, "a@example.com", "Dr. Johnson", "1:00 PM - 2:00 PM"
        )
    )

    appointments = await appointment_repository.find_by_patient(
        "a@example.com"
    )
    assert [appt.id for appt in appointments] == [1, 3]


@pytest.mark.asyncio
async def test_find_appointment_without_slot_matches_any(
    appointment_repository,
):
    await appointment_repository.add_appointment(
        make_appointment(1, "a@example.com", "Dr. Smith", "2:00 PM - 3:00 PM")
    )

    assert (
        await appointment_repository.find_appointment("a@example.com")
    ).id == 1
    assert (
        await appointment_repository.find_appointment(
            "a@example.com", "9:00 AM - 10:00 AM"
        )
        is None
    )


@pytest.mark.asyncio
async def test_find_by_doctor_and_slot(appointment_repository):
    await appointment_repository.add_appointment(
        make_appointment(1, "a@example.com", "Dr. Smith", "2:00 PM - 3:00 PM")
    )

    found = await appointment_repository.find_by_doctor_and_slot(
        "Dr. Smith", "2:00 PM - 3:00 PM"
    )
    assert found.patient.email == "a@example.com"
    assert (
        await appointment_repository.find_by_doctor_and_slot(
            "Dr. Johnson", "2:00 PM - 3:00 PM"
        )
        is None
    )


@pytest.mark.asyncio
async def test_update_time_slot(appointment_repository):
    await appointment_repository.add_appointment(
        make_appointment(1, "a@example.com", "Dr. Smith", "2:00 PM - 3:00 PM")
    )

    updated = await appointment_repository.update_time_slot(
        1, "10:00 AM - 11:00 AM"
    )
    assert updated.time_slot == "10:00 AM - 11:00 AM"
    assert await appointment_repository.update_time_slot(99, "x") is None


@pytest.mark.asyncio
async def test_delete_missing_appointment(appointment_repository):
    assert not await appointment_repository.delete_appointment(1)


@pytest.mark.asyncio
async def test_clear_resets_store(appointment_repository):
    await appointment_repository.add_appointment(
        make_appointment(
            await appointment_repository.next_id(),
            "a@example.com",
            "Dr. Smith",
            "2:00 PM - 3:00 PM",
        )
    )
    await appointment_repository.clear()

    assert await appointment_repository.find_by_patient("a@example.com") == []
    assert await appointment_repository.next_id() == 1


@pytest.mark.asyncio
async def test_default_doctor_catalog(doctor_repository):
    assert [doctor.name for doctor in DEFAULT_DOCTORS] == [
        "Dr. Smith",
        "Dr. Johnson",
    ]
    for doctor in DEFAULT_DOCTORS:
        assert len(doctor.slots) == 3
        assert await doctor_repository.get_doctor(doctor.name) == doctor


@pytest.mark.asyncio
async def test_custom_doctor_catalog():
    repository = InMemoryDoctorRepository(
        [Doctor(name="Dr. Grey", slots=["8:00 AM - 9:00 AM"])]
    )
    assert (await repository.get_doctor("Dr. Grey")).slots == [
        "8:00 AM - 9:00 AM"
    ]
    assert await repository.get_doctor("Dr. Smith") is None
