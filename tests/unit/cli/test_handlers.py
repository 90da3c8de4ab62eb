"""Unit tests for the shell-facing operation handlers."""

from unittest.mock import MagicMock

import pytest

from frontdesk.auth.access import AccessControl
from frontdesk.cli.handlers import ACCESS_DENIED_MESSAGE, ErrorKind, FrontDeskHandlers
from frontdesk.domain.models import Role
from frontdesk.records.appointments import AppointmentLedger
from frontdesk.records.patients import PatientRegistry

# Fixtures (registry, ledger, access, handlers) provided by tests/conftest.py


class TestRegisterPatient:
    def test_success(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.register_patient("Alice", 40, "Female", "555-0001")

        assert result.ok is True
        assert result.error is None
        assert result.value.patient_id == "P3"

    def test_validation_error(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.register_patient("", 40, "Female", "555-0001")

        assert result.ok is False
        assert result.error == ErrorKind.VALIDATION
        assert "Name" in result.message

    def test_fractional_age_is_a_validation_error(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.register_patient("Alice", 2.5, "Female", "555-0001")  # type: ignore[arg-type]

        assert result.error == ErrorKind.VALIDATION
        assert handlers.register_patient("Alice", 40, "Female", "555-0001").value.patient_id == "P3"


class TestFindPatient:
    def test_found(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.find_patient("p1")

        assert result.ok is True
        assert result.value.name == "John Doe"

    def test_not_found(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.find_patient("P9")

        assert result.error == ErrorKind.PATIENT_NOT_FOUND
        assert "P9" in result.message


class TestAppointments:
    def test_book_and_list_for_patient(self, handlers: FrontDeskHandlers) -> None:
        booked = handlers.book_appointment("P1", "Dr. Lee", "2025-03-10", "09:30", "Checkup")
        listed = handlers.appointments_for_patient("P1")

        assert booked.ok is True
        assert listed.value == (booked.value,)

    def test_book_bad_time(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.book_appointment("P1", "Dr. Lee", "2025-03-10", "25:61", "Checkup")

        assert result.error == ErrorKind.VALIDATION
        assert "HH:MM" in result.message

    def test_book_unknown_patient(self, handlers: FrontDeskHandlers) -> None:
        result = handlers.book_appointment("P9", "Dr. Lee", "2025-03-10", "09:30", "Checkup")

        assert result.error == ErrorKind.PATIENT_NOT_FOUND

    def test_cancel_twice(self, handlers: FrontDeskHandlers) -> None:
        handlers.book_appointment("P1", "Dr. Lee", "2025-03-10", "09:30", "Checkup")

        first = handlers.cancel_appointment("A1")
        second = handlers.cancel_appointment("A1")

        assert first.ok is True
        assert first.value is True
        assert "cancelled successfully" in first.message
        assert second.error == ErrorKind.APPOINTMENT_NOT_FOUND


class TestAdminGating:
    @pytest.mark.parametrize(
        "operation",
        ["list_patients", "list_appointments", "list_roles"],
    )
    @pytest.mark.parametrize("role", [Role.RECEPTIONIST, None], ids=["receptionist", "no-role"])
    def test_non_admin_is_denied(
        self, handlers: FrontDeskHandlers, operation: str, role: Role | None
    ) -> None:
        result = getattr(handlers, operation)(role)

        assert result.ok is False
        assert result.error == ErrorKind.ACCESS_DENIED
        assert result.message == ACCESS_DENIED_MESSAGE

    def test_admin_can_list_everything(self, handlers: FrontDeskHandlers) -> None:
        handlers.book_appointment("P1", "Dr. Lee", "2025-03-10", "09:30", "Checkup")

        patients = handlers.list_patients(Role.ADMIN)
        appointments = handlers.list_appointments(Role.ADMIN)
        roles = handlers.list_roles(Role.ADMIN)

        assert [p.patient_id for p in patients.value] == ["P1", "P2"]
        assert [a.appointment_id for a in appointments.value] == ["A1"]
        assert roles.value == {"admin": Role.ADMIN, "reception": Role.RECEPTIONIST}


class TestUnexpectedErrors:
    def test_unexpected_exception_becomes_result(
        self, registry: PatientRegistry, access: AccessControl
    ) -> None:
        ledger = MagicMock(spec=AppointmentLedger)
        ledger.cancel.side_effect = RuntimeError("boom")
        handlers = FrontDeskHandlers(registry, ledger, access)

        result = handlers.cancel_appointment("A1")

        assert result.ok is False
        assert result.error == ErrorKind.UNEXPECTED
        assert "boom" not in result.message
