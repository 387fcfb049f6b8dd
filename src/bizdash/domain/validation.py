"""Field validation shared by the entity services and calculators.

Each checker either returns the coerced value or raises a ValidationError
keyed by the field name. ``validate_fields`` runs several checkers and
reports every failing field at once, the way a form does.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from bizdash.domain.errors import ValidationError, field_error
from bizdash.utils.amount_parser import Number, parse_amount, parse_count
from bizdash.utils.date_parser import local_timezone, parse_date, start_of_day


def validate_fields(checks: dict[str, Callable[[], Any]]) -> dict[str, Any]:
    """Run every check and return the coerced values keyed by field.

    Raises:
        ValidationError: With one entry per failing field
    """
    values: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for field, check in checks.items():
        try:
            values[field] = check()
        except ValidationError as exc:
            errors.update(exc.errors)
    if errors:
        raise ValidationError(errors)
    return values


def require_text(field: str, value: Optional[str], message: str) -> str:
    """Return the stripped text, rejecting missing or blank values."""
    if value is None or not str(value).strip():
        raise field_error(field, message)
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Normalize optional free text: blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_money(
    field: str,
    value: Optional[Number],
    message: str,
    *,
    positive: bool = False,
) -> Decimal:
    """Coerce a monetary amount and check its lower bound.

    Args:
        field: Field name used as the error key
        value: Raw input
        message: Message shown when the bound is violated
        positive: Require > 0 instead of >= 0

    Raises:
        ValidationError: If the value is missing, non-numeric or out of range
    """
    if value is None:
        raise field_error(field, message)
    try:
        amount = parse_amount(value)
    except ValueError:
        raise field_error(field, f"{_label(field)} must be a number.") from None
    if amount < 0 or (positive and amount == 0):
        raise field_error(field, message)
    return amount


def parse_percentage(field: str, value: Optional[Number]) -> Decimal:
    """Coerce a percentage in the inclusive range 0-100."""
    if value is None:
        raise field_error(field, f"{_label(field)} must be a number.")
    try:
        percent = parse_amount(value)
    except ValueError:
        raise field_error(field, f"{_label(field)} must be a number.") from None
    if percent < 0:
        raise field_error(field, "Tip cannot be negative.")
    if percent > 100:
        raise field_error(field, "Tip cannot exceed 100%.")
    return percent


def parse_head_count(field: str, value: Optional[Union[str, int]], minimum: int = 1) -> int:
    """Coerce a whole number of people, at least ``minimum``."""
    message = f"Must be at least {minimum} person." if minimum == 1 else f"Must be at least {minimum} people."
    if value is None:
        raise field_error(field, message)
    try:
        count = parse_count(value)
    except ValueError:
        raise field_error(field, f"{_label(field)} must be a whole number.") from None
    if count < minimum:
        raise field_error(field, message)
    return count


def parse_timestamp(field: str, value: Union[None, str, date, datetime], message: str) -> datetime:
    """Coerce a date or timestamp into an absolute UTC-aware timestamp.

    Plain dates and date strings mean midnight of that day in the local
    calendar. Naive timestamps are read as local wall-clock time.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise field_error(field, message)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=local_timezone())
        return value
    if isinstance(value, date):
        return start_of_day(value)
    try:
        return start_of_day(parse_date(value))
    except ValueError:
        raise field_error(field, f"{_label(field)} is not a valid date.") from None


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()
