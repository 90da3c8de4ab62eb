from frontdesk.domain.exceptions import ValidationError, ValidationKind


def require_text(value: str | None, label: str) -> str:
    """Return ``value`` stripped, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required.", ValidationKind.MISSING_FIELD)
    return value.strip()


def require_positive_int(value: object, label: str) -> int:
    """Return ``value`` if it is a whole number above zero. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{label} must be a positive whole number, got {value!r}.",
            ValidationKind.INVALID_VALUE,
        )
    return value
