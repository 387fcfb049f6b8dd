"""Generic SQLAlchemy record store implementation."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from bizdash.database.base import RecordStore
from bizdash.database.models import create_session_factory
from bizdash.database.mappers import ORM_MODELS, record_to_domain, to_stored
from bizdash.domain.entities import EntityKind, Record

# Fields a caller may set, per kind. ``id`` and ``user_id`` are never
# writable; a project's ``start_date`` is stamped once by the store.
WRITABLE_FIELDS: dict[EntityKind, frozenset[str]] = {
    EntityKind.CLIENT: frozenset({"name", "phone"}),
    EntityKind.PROJECT: frozenset({"name", "description", "end_date"}),
    EntityKind.SERVICE: frozenset({"name", "price", "description", "end_date"}),
    EntityKind.REVENUE: frozenset({"amount", "date", "description"}),
    EntityKind.EXPENSE: frozenset({"category", "amount"}),
}


class SQLAlchemyRecordStore(RecordStore):
    """SQLAlchemy-based implementation of the RecordStore interface.

    Each operation opens its own short-lived session, so the store can be
    driven from a worker thread while reads happen on the caller's thread.
    """

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy record store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Release pooled connections."""
        bind = self.session_factory.kw.get("bind")
        if bind is not None:
            bind.dispose()

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def insert(
        self, kind: EntityKind, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> None:
        values = self._writable(kind, fields)
        model = ORM_MODELS[kind]
        with self.session_factory() as session:
            session.add(model(id=record_id, user_id=user_id, **values))
            session.commit()

    def update(
        self, kind: EntityKind, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> None:
        values = self._writable(kind, fields)
        with self.session_factory() as session:
            row = self._find(session, kind, user_id, record_id)
            if row is None:
                raise KeyError(f"{kind.label} {record_id} not found in {kind.collection_path(user_id)}")
            for name, value in values.items():
                setattr(row, name, value)
            session.commit()

    def delete(self, kind: EntityKind, user_id: str, record_id: str) -> None:
        with self.session_factory() as session:
            row = self._find(session, kind, user_id, record_id)
            if row is None:
                return
            session.delete(row)
            session.commit()

    def get(self, kind: EntityKind, user_id: str, record_id: str) -> Optional[Record]:
        with self.session_factory() as session:
            row = self._find(session, kind, user_id, record_id)
            if row is None:
                return None
            return record_to_domain(kind, row)

    def list(self, kind: EntityKind, user_id: str) -> list[Record]:
        model = ORM_MODELS[kind]
        with self.session_factory() as session:
            rows = session.scalars(
                select(model).where(model.user_id == user_id).order_by(model.seq)
            ).all()
            return [record_to_domain(kind, row) for row in rows]

    def _find(self, session: Session, kind: EntityKind, user_id: str, record_id: str):
        model = ORM_MODELS[kind]
        return session.scalars(
            select(model).where(model.id == record_id, model.user_id == user_id)
        ).first()

    @staticmethod
    def _writable(kind: EntityKind, fields: dict[str, Any]) -> dict[str, Any]:
        unknown = set(fields) - WRITABLE_FIELDS[kind]
        if unknown:
            raise ValueError(
                f"Field(s) {', '.join(sorted(unknown))} cannot be written on {kind.label} records"
            )
        return {
            name: to_stored(value) if isinstance(value, datetime) else value
            for name, value in fields.items()
        }
