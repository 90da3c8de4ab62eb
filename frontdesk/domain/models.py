import datetime as dt
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Roles a front desk account can hold."""

    ADMIN = "Admin"
    RECEPTIONIST = "Receptionist"


class EntityKind(str, Enum):
    """Namespaces for identifier allocation."""

    PATIENT = "patient"
    APPOINTMENT = "appointment"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_require_text)]


class Patient(BaseModel):
    """A registered patient. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    patient_id: NonBlankStr
    name: NonBlankStr
    age: int = Field(gt=0)
    gender: NonBlankStr
    contact_number: NonBlankStr


class Appointment(BaseModel):
    """A booked appointment.

    ``patient_name`` is a snapshot of the patient's name at booking time.
    """

    model_config = ConfigDict(frozen=True)

    appointment_id: NonBlankStr
    patient_id: NonBlankStr
    patient_name: NonBlankStr
    doctor_name: NonBlankStr
    date: dt.date
    time: dt.time
    reason: NonBlankStr
