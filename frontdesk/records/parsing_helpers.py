import datetime as dt
import re

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_HHMM_TIME = re.compile(r"([0-9]{2}):([0-9]{2})")


def parse_iso_date(value: str) -> tuple[dt.date | None, str | None]:
    """Parse a strict ``YYYY-MM-DD`` date. Returns ``(date, None)`` or ``(None, error_msg)``."""
    text = value.strip()
    if _ISO_DATE.fullmatch(text):
        try:
            return dt.date.fromisoformat(text), None
        except ValueError:
            pass
    return None, f"Invalid date '{value}'. Use YYYY-MM-DD."


def parse_hhmm_time(value: str) -> tuple[dt.time | None, str | None]:
    """Parse a 24-hour ``HH:MM`` time. Returns ``(time, None)`` or ``(None, error_msg)``.

    Seconds, single-digit hours and ``24:00`` are rejected.
    """
    match = _HHMM_TIME.fullmatch(value.strip())
    if match:
        try:
            return dt.time(int(match.group(1)), int(match.group(2))), None
        except ValueError:
            pass
    return None, f"Invalid time '{value}'. Use HH:MM (24-hour)."
