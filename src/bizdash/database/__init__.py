"""Record store layer for bizdash."""

from bizdash.database.base import RecordStore
from bizdash.database.factories import create_sqlite_store
from bizdash.database.gateway import PendingWrite, RecordGateway, Subscription

__all__ = ["RecordStore", "create_sqlite_store", "RecordGateway", "PendingWrite", "Subscription"]
