import pytest

from frontdesk.auth.access import AccessControl
from frontdesk.cli.handlers import FrontDeskHandlers
from frontdesk.config import FrontDeskConfig
from frontdesk.domain.seeds import DEFAULT_CREDENTIALS, SAMPLE_PATIENTS
from frontdesk.records.appointments import AppointmentLedger
from frontdesk.records.identifiers import IdentifierAllocator
from frontdesk.records.patients import PatientRegistry


@pytest.fixture
def config() -> FrontDeskConfig:
    return FrontDeskConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def allocator() -> IdentifierAllocator:
    return IdentifierAllocator()


@pytest.fixture
def registry(allocator: IdentifierAllocator) -> PatientRegistry:
    return PatientRegistry(allocator, seeds=SAMPLE_PATIENTS)


@pytest.fixture
def ledger(registry: PatientRegistry, allocator: IdentifierAllocator) -> AppointmentLedger:
    return AppointmentLedger(registry, allocator)


@pytest.fixture
def access() -> AccessControl:
    return AccessControl(DEFAULT_CREDENTIALS)


@pytest.fixture
def handlers(
    registry: PatientRegistry, ledger: AppointmentLedger, access: AccessControl
) -> FrontDeskHandlers:
    return FrontDeskHandlers(registry, ledger, access)
