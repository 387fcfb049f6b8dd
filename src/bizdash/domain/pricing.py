"""Price simulator: suggest a selling price from materials and labor."""

from decimal import Decimal
from typing import Optional

from bizdash.config import DEFAULT_HOURLY_RATE, DEFAULT_PROFIT_MARGIN
from bizdash.domain.validation import parse_money, validate_fields
from bizdash.utils.amount_parser import Number


class PriceSimulator:
    """Suggests ``(material_cost + labor_hours * hourly_rate) * profit_margin``.

    Each call computes from scratch; only the last suggestion is kept, for
    display.
    """

    def __init__(
        self,
        hourly_rate: Decimal = DEFAULT_HOURLY_RATE,
        profit_margin: Decimal = DEFAULT_PROFIT_MARGIN,
    ):
        self.hourly_rate = Decimal(hourly_rate)
        self.profit_margin = Decimal(profit_margin)
        self.last_price: Optional[Decimal] = None

    def suggest(self, material_cost: Number, labor_hours: Number) -> Decimal:
        """Return the suggested price.

        Raises:
            ValidationError: If either input is negative or not a number
        """
        values = validate_fields(
            {
                "material_cost": lambda: parse_money(
                    "material_cost", material_cost, "Material cost cannot be negative."
                ),
                "labor_hours": lambda: parse_money(
                    "labor_hours", labor_hours, "Labor hours cannot be negative."
                ),
            }
        )
        price = (values["material_cost"] + values["labor_hours"] * self.hourly_rate) * self.profit_margin
        self.last_price = price
        return price
