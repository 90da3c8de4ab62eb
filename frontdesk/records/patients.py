from collections.abc import Iterable

from loguru import logger

from frontdesk.domain.models import EntityKind, Patient
from frontdesk.domain.seeds import PatientSeed
from frontdesk.records.identifiers import IdentifierAllocator
from frontdesk.records.ports import AbstractPatientRegistry
from frontdesk.records.validation_helpers import require_positive_int, require_text


class PatientRegistry(AbstractPatientRegistry):
    """Append-only, in-memory collection of patients."""

    def __init__(
        self, allocator: IdentifierAllocator, seeds: Iterable[PatientSeed] = ()
    ) -> None:
        self._allocator = allocator
        self._patients: list[Patient] = []
        for seed in seeds:
            self.register(*seed)

    def register(self, name: str, age: int, gender: str, contact_number: str) -> Patient:
        name = require_text(name, "Name")
        gender = require_text(gender, "Gender")
        contact_number = require_text(contact_number, "Contact number")
        age = require_positive_int(age, "Age")

        patient = Patient(
            patient_id=self._allocator.next(EntityKind.PATIENT),
            name=name,
            age=age,
            gender=gender,
            contact_number=contact_number,
        )
        self._patients.append(patient)
        logger.info("Patient registered: id={}", patient.patient_id)
        return patient

    def find_by_id(self, patient_id: str) -> Patient | None:
        wanted = patient_id.lower()
        for patient in self._patients:
            if patient.patient_id.lower() == wanted:
                return patient
        logger.info("No patient found for id={}", patient_id)
        return None

    def list_all(self) -> tuple[Patient, ...]:
        return tuple(self._patients)
