"""Tip splitter: share a bill and its tip between people."""

from decimal import Decimal
from typing import Union

from bizdash.domain.entities import TipSplit
from bizdash.domain.validation import (
    parse_head_count,
    parse_money,
    parse_percentage,
    validate_fields,
)
from bizdash.utils.amount_parser import Number

HUNDRED = Decimal("100")


def split_tip(
    bill: Number,
    tip_percent: Number = Decimal("15"),
    num_people: Union[str, int] = 1,
) -> TipSplit:
    """Compute tip, grand total and the per-person shares.

    Args:
        bill: Bill amount, greater than zero
        tip_percent: Tip percentage, 0 to 100 inclusive
        num_people: Number of people sharing, at least 1

    Returns:
        TipSplit with totals and per-person values

    Raises:
        ValidationError: Listing every invalid field; nothing is computed
    """
    values = validate_fields(
        {
            "bill": lambda: parse_money("bill", bill, "Bill must be a positive number.", positive=True),
            "tip_percent": lambda: parse_percentage("tip_percent", tip_percent),
            "num_people": lambda: parse_head_count("num_people", num_people),
        }
    )
    bill_amount = values["bill"]
    percent = values["tip_percent"]
    people = values["num_people"]

    total_tip = bill_amount * percent / HUNDRED
    grand_total = bill_amount + total_tip
    return TipSplit(
        bill=bill_amount,
        tip_percent=percent,
        num_people=people,
        total_tip=total_tip,
        grand_total=grand_total,
        subtotal_per_person=bill_amount / people,
        tip_per_person=total_tip / people,
        total_per_person=grand_total / people,
    )
