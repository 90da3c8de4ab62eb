from collections.abc import Mapping, Sequence

from frontdesk.domain.models import Appointment, Patient, Role

PATIENT_COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 5),
    ("Name", 20),
    ("Age", 5),
    ("Gender", 10),
    ("Contact", 15),
)

APPOINTMENT_COLUMNS: tuple[tuple[str, int], ...] = (
    ("App. ID", 7),
    ("Patient ID", 10),
    ("Patient Name", 20),
    ("Doctor", 15),
    ("Date", 10),
    ("Time", 8),
    ("Reason", 25),
)

ROLE_COLUMNS: tuple[tuple[str, int], ...] = (("Username", 15), ("Role", 15))


def _rule(columns: Sequence[tuple[str, int]]) -> str:
    return "+" + "+".join("-" * (width + 2) for _, width in columns) + "+"


def _row(cells: Sequence[object], columns: Sequence[tuple[str, int]]) -> str:
    return "| " + " | ".join(
        f"{str(cell):<{width}}" for cell, (_, width) in zip(cells, columns)
    ) + " |"


def render_table(columns: Sequence[tuple[str, int]], rows: Sequence[Sequence[object]]) -> str:
    """Render rows as a fixed-width text table with a header."""
    rule = _rule(columns)
    lines = [rule, _row([title for title, _ in columns], columns), rule]
    lines.extend(_row(row, columns) for row in rows)
    lines.append(rule)
    return "\n".join(lines)


def format_time(appointment: Appointment) -> str:
    return appointment.time.strftime("%H:%M")


def patient_table(patients: Sequence[Patient]) -> str:
    return render_table(
        PATIENT_COLUMNS,
        [(p.patient_id, p.name, p.age, p.gender, p.contact_number) for p in patients],
    )


def appointment_table(appointments: Sequence[Appointment]) -> str:
    return render_table(
        APPOINTMENT_COLUMNS,
        [
            (
                a.appointment_id,
                a.patient_id,
                a.patient_name,
                a.doctor_name,
                a.date.isoformat(),
                format_time(a),
                a.reason,
            )
            for a in appointments
        ],
    )


def role_table(roles: Mapping[str, Role]) -> str:
    return render_table(ROLE_COLUMNS, [(user, role.value) for user, role in roles.items()])


def describe_patient(patient: Patient) -> str:
    return (
        f"Patient [ID={patient.patient_id} | Name={patient.name} | Age={patient.age} | "
        f"Gender={patient.gender} | Contact={patient.contact_number}]"
    )


def describe_appointment(appointment: Appointment) -> str:
    return (
        f"Appointment [ID={appointment.appointment_id} | PatientID={appointment.patient_id} | "
        f"Name={appointment.patient_name} | Doctor={appointment.doctor_name} | "
        f"Date={appointment.date.isoformat()} | Time={format_time(appointment)} | "
        f"Reason={appointment.reason}]"
    )
