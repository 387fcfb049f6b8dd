"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union

Number = Union[str, int, float, Decimal]


def parse_amount(amount: Number) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45" or "R$ 123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Numbers are accepted as-is; floats go through ``str`` so that 0.1 stays
    0.1 instead of its binary expansion.

    Args:
        amount: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed or is not finite
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount {amount!r}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float)):
        value = Decimal(str(amount))
    else:
        value = _parse_amount_string(amount)

    if not value.is_finite():
        raise ValueError(f"Amount '{amount}' is not a finite number")
    return value


def _parse_amount_string(amount_str: str) -> Decimal:
    if amount_str is None or not str(amount_str).strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = str(amount_str).strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    return -amount if is_negative else amount


def parse_count(value: Union[str, int]) -> int:
    """Parse a whole, positive-or-zero count such as a number of people.

    Raises:
        ValueError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not parse count {value!r}")
    if isinstance(value, int):
        return value
    amount = parse_amount(value)
    if amount != amount.to_integral_value():
        raise ValueError(f"Count '{value}' is not a whole number")
    return int(amount)
