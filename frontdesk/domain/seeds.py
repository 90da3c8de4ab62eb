"""Records loaded at process start so the desk is usable without prior setup."""

from typing import NamedTuple

from frontdesk.domain.models import Role


class PatientSeed(NamedTuple):
    name: str
    age: int
    gender: str
    contact_number: str


class CredentialSeed(NamedTuple):
    username: str
    password: str
    role: Role


SAMPLE_PATIENTS: tuple[PatientSeed, ...] = (
    PatientSeed("John Doe", 30, "Male", "555-1234"),
    PatientSeed("Jane Smith", 25, "Female", "555-5678"),
)

DEFAULT_CREDENTIALS: tuple[CredentialSeed, ...] = (
    CredentialSeed("admin", "admin123", Role.ADMIN),
    CredentialSeed("reception", "pass123", Role.RECEPTIONIST),
)
