from enum import Enum


class ValidationKind(str, Enum):
    """Which rule a rejected field broke."""

    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"
    BAD_FORMAT = "bad_format"


class FrontDeskError(Exception):
    """Base exception for all recoverable front desk errors."""


class ValidationError(FrontDeskError):
    """Raised when caller-supplied fields fail a syntactic or business rule."""

    def __init__(self, reason: str, kind: ValidationKind = ValidationKind.MISSING_FIELD) -> None:
        self.reason = reason
        self.kind = kind
        super().__init__(reason)


class PatientNotFound(FrontDeskError):
    """Raised when a referenced patient id has no matching record."""

    def __init__(self, patient_id: str) -> None:
        self.patient_id = patient_id
        super().__init__(f"Patient with ID '{patient_id}' not found.")


class AppointmentNotFound(FrontDeskError):
    """Raised when a referenced appointment id has no matching record."""

    def __init__(self, appointment_id: str) -> None:
        self.appointment_id = appointment_id
        super().__init__(f"Appointment with ID '{appointment_id}' not found.")
