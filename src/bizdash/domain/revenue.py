"""Revenue domain service."""

from datetime import date, datetime
from typing import Optional, Union

from bizdash.database.gateway import PendingWrite, RecordGateway
from bizdash.domain.entities import EntityKind, Revenue
from bizdash.domain.validation import (
    optional_text,
    parse_money,
    parse_timestamp,
    validate_fields,
)
from bizdash.utils.amount_parser import Number
from bizdash.utils.date_parser import to_local_date

AMOUNT_MINIMUM = "Amount must be a positive number."
DATE_REQUIRED = "Date is required."

DateInput = Union[None, str, date, datetime]


class RevenueService:
    """Service for recording revenue."""

    def __init__(self, gateway: RecordGateway):
        self.gateway = gateway

    def create_revenue(
        self,
        amount: Number,
        date: DateInput,
        description: Optional[str] = None,
    ) -> PendingWrite:
        """Record revenue.

        Args:
            amount: Amount received, zero or more
            date: Day the revenue was received (required)
            description: Optional description

        Raises:
            ValidationError: If amount or date is missing or invalid
        """
        values = validate_fields(
            {
                "amount": lambda: parse_money("amount", amount, AMOUNT_MINIMUM),
                "date": lambda: parse_timestamp("date", date, DATE_REQUIRED),
            }
        )
        values["description"] = optional_text(description)

        pending = self.gateway.create(EntityKind.REVENUE, values)
        self.gateway.notify("Revenue added", "A new revenue record was added.")
        return pending

    def get_revenue(self, revenue_id: str) -> Optional[Revenue]:
        """Get revenue record by ID."""
        return self.gateway.get(EntityKind.REVENUE, revenue_id)

    def list_revenues(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Revenue]:
        """List revenue records, optionally limited to an inclusive day range.

        Days are compared in the local calendar.
        """
        revenues = self.gateway.list(EntityKind.REVENUE)
        if start_date is not None:
            revenues = [r for r in revenues if to_local_date(r.date) >= start_date]
        if end_date is not None:
            revenues = [r for r in revenues if to_local_date(r.date) <= end_date]
        return revenues

    def update_revenue(
        self,
        revenue_id: str,
        amount: Optional[Number] = None,
        date: DateInput = None,
        description: Optional[str] = None,
    ) -> PendingWrite:
        """Update any of amount, date and description. None means unchanged.

        Raises:
            ValidationError: If a given amount or date is invalid
            StoreWriteFailure: From ``result()``, if the record does not exist
        """
        checks = {}
        if amount is not None:
            checks["amount"] = lambda: parse_money("amount", amount, AMOUNT_MINIMUM)
        if date is not None:
            checks["date"] = lambda: parse_timestamp("date", date, DATE_REQUIRED)
        fields = validate_fields(checks)
        if description is not None:
            fields["description"] = optional_text(description)

        pending = self.gateway.update(EntityKind.REVENUE, revenue_id, fields)
        self.gateway.notify("Revenue updated", "The record was updated.")
        return pending

    def delete_revenue(self, revenue_id: str) -> PendingWrite:
        """Delete a revenue record.

        Raises:
            StoreWriteFailure: From ``result()``, if the record does not exist
        """
        pending = self.gateway.delete(EntityKind.REVENUE, revenue_id)
        self.gateway.notify("Revenue deleted", "The revenue record was removed.")
        return pending
