"""Service catalog domain service (the services a business offers)."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from bizdash.database.gateway import PendingWrite, RecordGateway
from bizdash.domain.entities import EntityKind, Service
from bizdash.domain.validation import (
    optional_text,
    parse_money,
    parse_timestamp,
    require_text,
    validate_fields,
)
from bizdash.utils.amount_parser import Number

NAME_REQUIRED = "Service name is required."
PRICE_MINIMUM = "Price must be a positive number."


class ServiceCatalog:
    """Service for managing offered services."""

    def __init__(self, gateway: RecordGateway):
        self.gateway = gateway

    def create_service(
        self,
        name: str,
        price: Number = Decimal("0"),
        description: Optional[str] = None,
        end_date: Union[None, str, date, datetime] = None,
    ) -> PendingWrite:
        """Add a service to the catalog.

        Args:
            name: Service name (required)
            price: Price, zero or more
            description: Optional description
            end_date: Optional delivery date

        Raises:
            ValidationError: If name, price or end date is invalid
        """
        checks = {
            "name": lambda: require_text("name", name, NAME_REQUIRED),
            "price": lambda: parse_money("price", price, PRICE_MINIMUM),
        }
        if end_date is not None:
            checks["end_date"] = lambda: parse_timestamp("end_date", end_date, "End date is invalid.")
        values = validate_fields(checks)
        values["description"] = optional_text(description)

        pending = self.gateway.create(EntityKind.SERVICE, values)
        self.gateway.notify("Service added", f"{values['name']} was added.")
        return pending

    def get_service(self, service_id: str) -> Optional[Service]:
        """Get service by ID."""
        return self.gateway.get(EntityKind.SERVICE, service_id)

    def list_services(self) -> list[Service]:
        """List all services of the user."""
        return self.gateway.list(EntityKind.SERVICE)

    def update_service(
        self,
        service_id: str,
        name: Optional[str] = None,
        price: Optional[Number] = None,
        description: Optional[str] = None,
    ) -> PendingWrite:
        """Update any of name, price and description. None means unchanged.

        Raises:
            ValidationError: If a given name or price is invalid
            StoreWriteFailure: From ``result()``, if the service does not exist
        """
        checks = {}
        if name is not None:
            checks["name"] = lambda: require_text("name", name, NAME_REQUIRED)
        if price is not None:
            checks["price"] = lambda: parse_money("price", price, PRICE_MINIMUM)
        fields = validate_fields(checks)
        if description is not None:
            fields["description"] = optional_text(description)

        pending = self.gateway.update(EntityKind.SERVICE, service_id, fields)
        self.gateway.notify("Service updated", f"{fields.get('name', 'The service')} was updated.")
        return pending

    def set_end_date(
        self, service_id: str, end_date: Union[None, str, date, datetime]
    ) -> PendingWrite:
        """Set the delivery date, or clear it with None."""
        value = None
        if end_date is not None:
            value = parse_timestamp("end_date", end_date, "End date is invalid.")

        pending = self.gateway.update(EntityKind.SERVICE, service_id, {"end_date": value})
        self.gateway.notify("Service updated", "The delivery date was updated.")
        return pending

    def delete_service(self, service_id: str) -> PendingWrite:
        """Remove a service from the catalog.

        Raises:
            StoreWriteFailure: From ``result()``, if the service does not exist
        """
        pending = self.gateway.delete(EntityKind.SERVICE, service_id)
        self.gateway.notify("Service deleted", "The service was removed.")
        return pending
