from loguru import logger

from frontdesk.domain.exceptions import (
    AppointmentNotFound,
    PatientNotFound,
    ValidationError,
    ValidationKind,
)
from frontdesk.domain.models import Appointment, EntityKind, Patient
from frontdesk.records.identifiers import IdentifierAllocator
from frontdesk.records.parsing_helpers import parse_hhmm_time, parse_iso_date
from frontdesk.records.ports import AbstractAppointmentLedger, PatientLookup
from frontdesk.records.validation_helpers import require_text


class AppointmentLedger(AbstractAppointmentLedger):
    """In-memory ledger of booked appointments.

    Holds a read-only reference to the patient registry so that every booking
    and per-patient query refers to a patient that exists.
    """

    def __init__(self, patients: PatientLookup, allocator: IdentifierAllocator) -> None:
        self._patients = patients
        self._allocator = allocator
        self._appointments: list[Appointment] = []

    def _require_patient(self, patient_id: str) -> Patient:
        patient = self._patients.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFound(patient_id)
        return patient

    def book(
        self, patient_id: str, doctor_name: str, date: str, time: str, reason: str
    ) -> Appointment:
        patient = self._require_patient(patient_id)
        doctor_name = require_text(doctor_name, "Doctor name")
        reason = require_text(reason, "Reason")
        date_text = require_text(date, "Date")
        time_text = require_text(time, "Time")

        date_val, date_err = parse_iso_date(date_text)
        time_val, time_err = parse_hhmm_time(time_text)
        err = date_err or time_err
        if err or date_val is None or time_val is None:
            raise ValidationError(err or "Invalid date/time format.", ValidationKind.BAD_FORMAT)

        appointment = Appointment(
            appointment_id=self._allocator.next(EntityKind.APPOINTMENT),
            patient_id=patient.patient_id,
            patient_name=patient.name,
            doctor_name=doctor_name,
            date=date_val,
            time=time_val,
            reason=reason,
        )
        self._appointments.append(appointment)
        logger.info(
            "Appointment booked: id={}, patient={}, date={}, time={}",
            appointment.appointment_id,
            appointment.patient_id,
            appointment.date,
            appointment.time,
        )
        return appointment

    def find_by_patient(self, patient_id: str) -> tuple[Appointment, ...]:
        patient = self._require_patient(patient_id)
        wanted = patient.patient_id.lower()
        found = tuple(a for a in self._appointments if a.patient_id.lower() == wanted)
        if not found:
            logger.info("No appointments found for patient={}", patient.patient_id)
        return found

    def list_all(self) -> tuple[Appointment, ...]:
        return tuple(self._appointments)

    def cancel(self, appointment_id: str) -> bool:
        wanted = appointment_id.lower()
        appointment = next(
            (a for a in self._appointments if a.appointment_id.lower() == wanted), None
        )
        if appointment is None:
            raise AppointmentNotFound(appointment_id)

        self._appointments.remove(appointment)
        logger.info("Appointment cancelled: id={}", appointment.appointment_id)
        return True
