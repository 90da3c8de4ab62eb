from abc import ABC, abstractmethod
from typing import Protocol

from frontdesk.domain.models import Appointment, Patient


class PatientLookup(Protocol):
    """Read-only view of the patient registry used for referential checks."""

    def find_by_id(self, patient_id: str) -> Patient | None:
        """Return the patient with this id, ignoring case, or None."""
        ...


class AbstractPatientRegistry(ABC):
    """Abstract base class for the patient registry."""

    @abstractmethod
    def register(self, name: str, age: int, gender: str, contact_number: str) -> Patient:
        """Validate and register a new patient.

        Args:
            name: Patient's full name.
            age: Age in whole years, must be positive.
            gender: Free-text gender.
            contact_number: Phone number or other contact.

        Returns:
            The registered patient with its assigned ID.

        Raises:
            ValidationError: If a field is blank or the age is not positive.
        """

    @abstractmethod
    def find_by_id(self, patient_id: str) -> Patient | None:
        """Look up a patient by ID, ignoring case.

        Returns:
            The matching patient, or None if there is no such ID.
        """

    @abstractmethod
    def list_all(self) -> tuple[Patient, ...]:
        """Return every patient in registration order."""


class AbstractAppointmentLedger(ABC):
    """Abstract base class for the appointment ledger."""

    @abstractmethod
    def book(
        self, patient_id: str, doctor_name: str, date: str, time: str, reason: str
    ) -> Appointment:
        """Book an appointment for an existing patient.

        Args:
            patient_id: ID of a registered patient.
            doctor_name: Name of the attending doctor.
            date: Calendar date in ``YYYY-MM-DD`` form.
            time: 24-hour time in ``HH:MM`` form.
            reason: Reason for the visit.

        Returns:
            The booked appointment with its assigned ID.

        Raises:
            PatientNotFound: If no patient has ``patient_id``.
            ValidationError: If a field is blank or the date/time is malformed.
        """

    @abstractmethod
    def find_by_patient(self, patient_id: str) -> tuple[Appointment, ...]:
        """Return a patient's appointments in booking order.

        Raises:
            PatientNotFound: If no patient has ``patient_id``.
        """

    @abstractmethod
    def list_all(self) -> tuple[Appointment, ...]:
        """Return every appointment in booking order."""

    @abstractmethod
    def cancel(self, appointment_id: str) -> bool:
        """Remove an appointment from the ledger.

        Returns:
            True once the appointment has been removed.

        Raises:
            AppointmentNotFound: If no appointment has ``appointment_id``.
        """
