import sys
from collections.abc import Callable
from enum import IntEnum

from loguru import logger

from frontdesk.auth.access import AccessControl
from frontdesk.cli.formatting import (
    appointment_table,
    describe_appointment,
    describe_patient,
    patient_table,
    role_table,
)
from frontdesk.cli.handlers import FrontDeskHandlers, OperationResult
from frontdesk.config import FrontDeskConfig
from frontdesk.domain.models import Role
from frontdesk.factory import build_front_desk


class MenuOption(IntEnum):
    REGISTER_PATIENT = 1
    BOOK_APPOINTMENT = 2
    VIEW_APPOINTMENTS_BY_PATIENT = 3
    CANCEL_APPOINTMENT = 4
    VIEW_ALL_PATIENTS = 5
    VIEW_ALL_APPOINTMENTS = 6
    VIEW_USER_ROLES = 7
    LOGOUT = 0


MENU_LABELS: dict[MenuOption, str] = {
    MenuOption.REGISTER_PATIENT: "Register New Patient",
    MenuOption.BOOK_APPOINTMENT: "Book New Appointment",
    MenuOption.VIEW_APPOINTMENTS_BY_PATIENT: "View Appointments by Patient ID",
    MenuOption.CANCEL_APPOINTMENT: "Cancel Appointment",
    MenuOption.VIEW_ALL_PATIENTS: "View All Patients (Admin)",
    MenuOption.VIEW_ALL_APPOINTMENTS: "View All Appointments (Admin)",
    MenuOption.VIEW_USER_ROLES: "View User Roles (Admin)",
    MenuOption.LOGOUT: "Logout",
}

ADMIN_OPTIONS = frozenset(
    {
        MenuOption.VIEW_ALL_PATIENTS,
        MenuOption.VIEW_ALL_APPOINTMENTS,
        MenuOption.VIEW_USER_ROLES,
    }
)


class FrontDeskShell:
    """Interactive login and menu loop on top of :class:`FrontDeskHandlers`.

    ``input_fn`` and ``output_fn`` default to the console; tests pass
    scripted replacements.
    """

    def __init__(
        self,
        handlers: FrontDeskHandlers,
        access: AccessControl,
        *,
        max_login_attempts: int = 3,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._handlers = handlers
        self._access = access
        self._max_attempts = max_login_attempts
        self._input = input_fn
        self._out = output_fn

    def _ask_text(self, prompt: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self._out("Input cannot be empty. Please try again.")

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._out("Invalid input. Please enter a whole number.")

    def _ask_positive_int(self, prompt: str) -> int:
        while True:
            value = self._ask_int(prompt)
            if value > 0:
                return value
            self._out("Invalid input. Please enter a positive number.")

    def _report_failure(self, result: OperationResult) -> None:
        self._out(f"Operation Failed: {result.message}")

    def login(self) -> Role | None:
        """Prompt for credentials until one matches or the attempts run out."""
        for attempts_left in range(self._max_attempts, 0, -1):
            self._out(f"\nPlease Login (Attempts left: {attempts_left})")
            username = self._input("Username: ")
            password = self._input("Password: ")
            role = self._access.login(username, password)
            if role is not None:
                return role
            self._out("Invalid username or password.")
        return None

    def _visible_options(self, role: Role) -> list[MenuOption]:
        is_admin = self._access.is_admin(role)
        return [option for option in MenuOption if is_admin or option not in ADMIN_OPTIONS]

    def _show_menu(self, role: Role) -> None:
        self._out(f"\n--- {role.value} Menu ---")
        for option in self._visible_options(role):
            self._out(f"{option.value}. {MENU_LABELS[option]}")

    def run_menu(self, role: Role) -> None:
        """Serve menu choices until the user logs out."""
        actions: dict[MenuOption, Callable[[], None]] = {
            MenuOption.REGISTER_PATIENT: self._register_patient,
            MenuOption.BOOK_APPOINTMENT: self._book_appointment,
            MenuOption.VIEW_APPOINTMENTS_BY_PATIENT: self._view_patient_appointments,
            MenuOption.CANCEL_APPOINTMENT: self._cancel_appointment,
            MenuOption.VIEW_ALL_PATIENTS: lambda: self._view_all_patients(role),
            MenuOption.VIEW_ALL_APPOINTMENTS: lambda: self._view_all_appointments(role),
            MenuOption.VIEW_USER_ROLES: lambda: self._view_user_roles(role),
        }

        while True:
            self._show_menu(role)
            choice = self._ask_int("Enter your choice: ")
            if choice == MenuOption.LOGOUT:
                self._out("Logging out...")
                return

            try:
                action = actions[MenuOption(choice)]
            except (ValueError, KeyError):
                self._out("Invalid choice. Please try again.")
                continue

            try:
                action()
            except Exception as exc:
                logger.exception("Unexpected error handling menu choice {}", choice)
                self._out(f"An unexpected error occurred: {exc}")

    def _register_patient(self) -> None:
        self._out("\n--- Register New Patient ---")
        name = self._ask_text("Enter Patient Name: ")
        age = self._ask_positive_int("Enter Patient Age: ")
        gender = self._ask_text("Enter Patient Gender (Male/Female/Other): ")
        contact = self._ask_text("Enter Patient Contact Number: ")

        result = self._handlers.register_patient(name, age, gender, contact)
        if not result.ok:
            self._report_failure(result)
            return
        self._out(f"{result.message} Assigned ID: {result.value.patient_id}")
        self._out(f"Details: {describe_patient(result.value)}")

    def _book_appointment(self) -> None:
        self._out("\n--- Book New Appointment ---")
        lookup = self._handlers.find_patient(self._ask_text("Enter Patient ID: "))
        if not lookup.ok:
            self._report_failure(lookup)
            return
        patient = lookup.value
        self._out(f"Booking for Patient: {patient.name} (ID: {patient.patient_id})")

        doctor = self._ask_text("Enter Doctor Name: ")
        date = self._ask_text("Enter Appointment Date (YYYY-MM-DD): ")
        time = self._ask_text("Enter Appointment Time (HH:MM - 24hr format): ")
        reason = self._ask_text("Enter Reason for Appointment: ")

        result = self._handlers.book_appointment(patient.patient_id, doctor, date, time, reason)
        if not result.ok:
            self._report_failure(result)
            return
        self._out(result.message)
        self._out(f"Details: {describe_appointment(result.value)}")

    def _view_patient_appointments(self) -> None:
        self._out("\n--- View Appointments by Patient ID ---")
        lookup = self._handlers.find_patient(
            self._ask_text("Enter Patient ID to view appointments: ")
        )
        if not lookup.ok:
            self._report_failure(lookup)
            return
        patient = lookup.value

        result = self._handlers.appointments_for_patient(patient.patient_id)
        if not result.ok:
            self._report_failure(result)
            return

        self._out(f"\nAppointments for Patient: {patient.name} (ID: {patient.patient_id})")
        if not result.value:
            self._out("No appointments found for this patient.")
            return
        self._out(appointment_table(result.value))
        self._out(f"Total appointments found: {len(result.value)}")

    def _cancel_appointment(self) -> None:
        self._out("\n--- Cancel Appointment ---")
        result = self._handlers.cancel_appointment(
            self._ask_text("Enter Appointment ID to cancel: ")
        )
        if not result.ok:
            self._report_failure(result)
            return
        self._out(result.message)

    def _view_all_patients(self, role: Role) -> None:
        result = self._handlers.list_patients(role)
        if not result.ok:
            self._out(result.message)
            return
        self._out("\n--- View All Registered Patients ---")
        if not result.value:
            self._out("No patients registered yet.")
            return
        self._out(f"Total Patients: {len(result.value)}")
        self._out(patient_table(result.value))

    def _view_all_appointments(self, role: Role) -> None:
        result = self._handlers.list_appointments(role)
        if not result.ok:
            self._out(result.message)
            return
        self._out("\n--- View All Booked Appointments ---")
        if not result.value:
            self._out("No appointments booked yet.")
            return
        self._out(f"Total Appointments: {len(result.value)}")
        self._out(appointment_table(result.value))

    def _view_user_roles(self, role: Role) -> None:
        result = self._handlers.list_roles(role)
        if not result.ok:
            self._out(result.message)
            return
        self._out("\n--- System User Roles ---")
        self._out(role_table(result.value))

    def run(self) -> int:
        """Run one login and menu session. Returns the process exit status."""
        self._out("========================================")
        self._out("   Welcome to the Clinic Front Desk")
        self._out("========================================")

        role = self.login()
        if role is None:
            self._out("\nLogin failed. Exiting application.")
            return 1

        self._out(f"\nLogin Successful. Welcome, {role.value}!")
        self.run_menu(role)
        self._out("\nThank you for using the Clinic Front Desk. Goodbye!")
        return 0


def main() -> None:
    config = FrontDeskConfig()
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    desk = build_front_desk(config)
    handlers = FrontDeskHandlers(desk.patients, desk.appointments, desk.access)
    shell = FrontDeskShell(
        handlers, desk.access, max_login_attempts=config.max_login_attempts
    )
    try:
        status = shell.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
        status = 0
    sys.exit(status)


if __name__ == "__main__":
    main()
