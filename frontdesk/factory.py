from typing import NamedTuple

from loguru import logger

from frontdesk.auth.access import AccessControl
from frontdesk.config import FrontDeskConfig
from frontdesk.domain.models import EntityKind
from frontdesk.domain.seeds import DEFAULT_CREDENTIALS, SAMPLE_PATIENTS
from frontdesk.records.appointments import AppointmentLedger
from frontdesk.records.identifiers import IdentifierAllocator
from frontdesk.records.patients import PatientRegistry


class FrontDesk(NamedTuple):
    """The components that make up one front desk process."""

    allocator: IdentifierAllocator
    patients: PatientRegistry
    appointments: AppointmentLedger
    access: AccessControl


def build_front_desk(config: FrontDeskConfig) -> FrontDesk:
    """Build the front desk components and load their seed data."""
    allocator = IdentifierAllocator(
        {
            EntityKind.PATIENT: config.patient_id_prefix,
            EntityKind.APPOINTMENT: config.appointment_id_prefix,
        }
    )
    seeds = SAMPLE_PATIENTS if config.seed_sample_data else ()
    patients = PatientRegistry(allocator, seeds=seeds)
    appointments = AppointmentLedger(patients, allocator)
    access = AccessControl(DEFAULT_CREDENTIALS)
    logger.info("Front desk ready with {} seeded patient(s)", len(patients.list_all()))
    return FrontDesk(allocator, patients, appointments, access)
