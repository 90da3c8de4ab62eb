from collections.abc import Callable
from enum import Enum
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict

from frontdesk.auth.access import AccessControl
from frontdesk.domain.exceptions import (
    AppointmentNotFound,
    FrontDeskError,
    PatientNotFound,
    ValidationError,
)
from frontdesk.domain.models import Role
from frontdesk.records.ports import AbstractAppointmentLedger, AbstractPatientRegistry

ACCESS_DENIED_MESSAGE = "Access Denied. Admin role required."


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PATIENT_NOT_FOUND = "patient_not_found"
    APPOINTMENT_NOT_FOUND = "appointment_not_found"
    ACCESS_DENIED = "access_denied"
    UNEXPECTED = "unexpected"


_ERROR_KINDS: dict[type[FrontDeskError], ErrorKind] = {
    ValidationError: ErrorKind.VALIDATION,
    PatientNotFound: ErrorKind.PATIENT_NOT_FOUND,
    AppointmentNotFound: ErrorKind.APPOINTMENT_NOT_FOUND,
}


class OperationResult(BaseModel):
    """Outcome of one front desk operation, as seen by the shell."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: ErrorKind | None = None
    message: str = ""
    value: Any = None

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "OperationResult":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(ok=False, error=error, message=message)


class FrontDeskHandlers:
    """Runs core operations and turns their errors into ``OperationResult`` values."""

    def __init__(
        self,
        patients: AbstractPatientRegistry,
        appointments: AbstractAppointmentLedger,
        access: AccessControl,
    ) -> None:
        self._patients = patients
        self._appointments = appointments
        self._access = access

    def _run(self, action: str, call: Callable[[], Any], message: str = "") -> OperationResult:
        try:
            return OperationResult.success(call(), message)
        except FrontDeskError as exc:
            kind = _ERROR_KINDS.get(type(exc), ErrorKind.VALIDATION)
            return OperationResult.failure(kind, str(exc))
        except Exception:
            logger.exception("Unexpected error in {}", action)
            return OperationResult.failure(
                ErrorKind.UNEXPECTED, f"An unexpected error occurred while trying to {action}."
            )

    def _admin_only(self, role: Role | str | None) -> OperationResult | None:
        if self._access.is_admin(role):
            return None
        logger.warning("Denied admin-only operation for role={}", role)
        return OperationResult.failure(ErrorKind.ACCESS_DENIED, ACCESS_DENIED_MESSAGE)

    def register_patient(
        self, name: str, age: int, gender: str, contact_number: str
    ) -> OperationResult:
        return self._run(
            "register the patient",
            lambda: self._patients.register(name, age, gender, contact_number),
            "Patient registered successfully!",
        )

    def find_patient(self, patient_id: str) -> OperationResult:
        def lookup() -> Any:
            patient = self._patients.find_by_id(patient_id)
            if patient is None:
                raise PatientNotFound(patient_id)
            return patient

        return self._run("look up the patient", lookup)

    def book_appointment(
        self, patient_id: str, doctor_name: str, date: str, time: str, reason: str
    ) -> OperationResult:
        return self._run(
            "book the appointment",
            lambda: self._appointments.book(patient_id, doctor_name, date, time, reason),
            "Appointment booked successfully!",
        )

    def appointments_for_patient(self, patient_id: str) -> OperationResult:
        return self._run(
            "list the patient's appointments",
            lambda: self._appointments.find_by_patient(patient_id),
        )

    def cancel_appointment(self, appointment_id: str) -> OperationResult:
        return self._run(
            "cancel the appointment",
            lambda: self._appointments.cancel(appointment_id),
            f"Appointment ID '{appointment_id}' cancelled successfully.",
        )

    def list_patients(self, role: Role | str | None) -> OperationResult:
        return self._admin_only(role) or self._run("list patients", self._patients.list_all)

    def list_appointments(self, role: Role | str | None) -> OperationResult:
        return self._admin_only(role) or self._run(
            "list appointments", self._appointments.list_all
        )

    def list_roles(self, role: Role | str | None) -> OperationResult:
        return self._admin_only(role) or self._run(
            "list user roles", lambda: dict(self._access.all_roles())
        )
