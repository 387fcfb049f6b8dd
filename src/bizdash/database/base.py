"""Abstract record store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from bizdash.domain.entities import EntityKind, Record


class RecordStore(ABC):
    """Per-user document collections, one per entity kind.

    All operations are synchronous and scoped by an opaque ``user_id``.
    Implementations never validate field values; that happens before a
    write is requested.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create the collections if they do not exist yet."""
        pass

    @abstractmethod
    def insert(
        self, kind: EntityKind, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> None:
        """Insert a new record with a caller-generated id."""
        pass

    @abstractmethod
    def update(
        self, kind: EntityKind, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> None:
        """Overwrite the given fields of an existing record.

        Raises:
            KeyError: If the record does not exist in the user's collection
            ValueError: If a field is unknown or may not be changed
        """
        pass

    @abstractmethod
    def delete(self, kind: EntityKind, user_id: str, record_id: str) -> None:
        """Delete a record. Deleting a missing record is a no-op."""
        pass

    @abstractmethod
    def get(self, kind: EntityKind, user_id: str, record_id: str) -> Optional[Record]:
        """Get one record by id."""
        pass

    @abstractmethod
    def list(self, kind: EntityKind, user_id: str) -> list[Record]:
        """List every record of a collection."""
        pass
