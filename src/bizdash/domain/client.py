"""Client domain service."""

from typing import Optional

from bizdash.database.gateway import PendingWrite, RecordGateway
from bizdash.domain.entities import Client, EntityKind
from bizdash.domain.validation import optional_text, require_text, validate_fields

NAME_REQUIRED = "Client name is required."


class ClientService:
    """Service for managing clients."""

    def __init__(self, gateway: RecordGateway):
        """Initialize client service.

        Args:
            gateway: Record gateway scoped to the signed-in user
        """
        self.gateway = gateway

    def create_client(self, name: str, phone: Optional[str] = None) -> PendingWrite:
        """Create a client.

        Args:
            name: Client name (required)
            phone: Optional phone number

        Returns:
            Handle on the scheduled write; ``record_id`` is the new client's id

        Raises:
            ValidationError: If the name is blank
        """
        values = validate_fields({"name": lambda: require_text("name", name, NAME_REQUIRED)})
        pending = self.gateway.create(
            EntityKind.CLIENT, {"name": values["name"], "phone": optional_text(phone)}
        )
        self.gateway.notify("Client added", f"{values['name']} was added.")
        return pending

    def get_client(self, client_id: str) -> Optional[Client]:
        """Get client by ID."""
        return self.gateway.get(EntityKind.CLIENT, client_id)

    def list_clients(self) -> list[Client]:
        """List all clients of the user."""
        return self.gateway.list(EntityKind.CLIENT)

    def rename_client(self, client_id: str, name: str) -> PendingWrite:
        """Change a client's name in place.

        Raises:
            ValidationError: If the name is blank
            StoreWriteFailure: From ``result()``, if the client does not exist
        """
        values = validate_fields({"name": lambda: require_text("name", name, NAME_REQUIRED)})
        pending = self.gateway.update(EntityKind.CLIENT, client_id, {"name": values["name"]})
        self.gateway.notify("Client updated", "The name field was updated.")
        return pending

    def set_phone(self, client_id: str, phone: Optional[str]) -> PendingWrite:
        """Change or clear a client's phone number in place.

        Raises:
            StoreWriteFailure: From ``result()``, if the client does not exist
        """
        pending = self.gateway.update(EntityKind.CLIENT, client_id, {"phone": optional_text(phone)})
        self.gateway.notify("Client updated", "The phone field was updated.")
        return pending

    def delete_client(self, client_id: str) -> PendingWrite:
        """Delete a client.

        Raises:
            StoreWriteFailure: From ``result()``, if the client does not exist
        """
        pending = self.gateway.delete(EntityKind.CLIENT, client_id)
        self.gateway.notify("Client deleted", "The client was removed.")
        return pending
