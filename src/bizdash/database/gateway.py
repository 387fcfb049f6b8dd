"""Fire-and-forget record gateway with live collection subscriptions.

Writes are queued on a single background worker and the caller gets a
``PendingWrite`` back straight away. Callers that care can wait on it; the
rest move on and learn about failures through the notifier. Because one
worker applies writes in submission order, two quick edits to the same
record resolve last-write-wins.

Updates and deletes check that the record exists on the worker, so an edit
queued right behind its create finds the record. A missing record fails the
write like any other store error.

Subscribers receive the full list of a collection when they subscribe and
again after every successful write to it. Every snapshot is read and
delivered on the worker, so the last one a listener sees is always current.
"""

from __future__ import annotations

import threading
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Optional

from bizdash.collaborators import Notifier, NullNotifier
from bizdash.database.base import RecordStore
from bizdash.domain.entities import EntityKind, Record
from bizdash.domain.errors import NotFoundError, StoreWriteFailure, record_not_found
from bizdash.logging_config import get_logger

logger = get_logger(__name__)

Listener = Callable[[list[Record]], None]


@dataclass(frozen=True)
class PendingWrite:
    """Handle on a scheduled write."""

    operation: str
    kind: EntityKind
    record_id: str
    future: Future

    def done(self) -> bool:
        return self.future.done()

    def result(self, timeout: Optional[float] = None) -> str:
        """Wait for the write and return the record id.

        Raises:
            StoreWriteFailure: If the store rejected the write
        """
        self.future.result(timeout)
        return self.record_id

    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]:
        return self.future.exception(timeout)


class Subscription:
    """Registration of a listener on one collection."""

    def __init__(self, gateway: "RecordGateway", kind: EntityKind, listener: Listener):
        self.gateway = gateway
        self.kind = kind
        self.listener = listener
        self.active = True

    def cancel(self) -> None:
        """Stop receiving snapshots. Cancelling twice is harmless."""
        if self.active:
            self.gateway._unsubscribe(self)
            self.active = False


class RecordGateway:
    """create/update/delete against one user's collections, without blocking."""

    def __init__(
        self,
        store: RecordStore,
        user_id: str,
        notifier: Optional[Notifier] = None,
    ):
        """Initialize the gateway.

        Args:
            store: Backing record store
            user_id: Opaque identifier of the signed-in user
            notifier: Receives failure notices (and confirmations sent by services)
        """
        self.store = store
        self.user_id = user_id
        self.notifier = notifier or NullNotifier()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bizdash-writes")
        self._pending: set[Future] = set()
        self._subscriptions: dict[EntityKind, list[Subscription]] = {}
        self._lock = threading.Lock()
        self._closed = False

    # Writes
    def create(self, kind: EntityKind, fields: dict[str, Any]) -> PendingWrite:
        """Schedule creation of a record; the id is generated immediately."""
        record_id = uuid.uuid4().hex
        return self._schedule(
            "create", kind, record_id,
            lambda: self.store.insert(kind, self.user_id, record_id, dict(fields)),
        )

    def update(self, kind: EntityKind, record_id: str, fields: dict[str, Any]) -> PendingWrite:
        """Schedule an update of the given fields of a record."""

        def write() -> None:
            self._require(kind, record_id)
            self.store.update(kind, self.user_id, record_id, dict(fields))

        return self._schedule("update", kind, record_id, write)

    def delete(self, kind: EntityKind, record_id: str) -> PendingWrite:
        """Schedule deletion of a record."""

        def write() -> None:
            self._require(kind, record_id)
            self.store.delete(kind, self.user_id, record_id)

        return self._schedule("delete", kind, record_id, write)

    # Reads
    def list(self, kind: EntityKind) -> list[Record]:
        """Return the current contents of a collection."""
        return self.store.list(kind, self.user_id)

    def get(self, kind: EntityKind, record_id: str) -> Optional[Record]:
        """Return one record, or None if it is not in the user's collection."""
        return self.store.get(kind, self.user_id, record_id)

    def subscribe(self, kind: EntityKind, listener: Listener) -> Subscription:
        """Register a listener for full-list snapshots of a collection.

        The first snapshot is queued behind the writes already scheduled and
        later ones follow every successful write to ``kind``. All of them are
        delivered from the write worker.
        """
        if self._closed:
            raise RuntimeError("Gateway is closed")
        subscription = Subscription(self, kind, listener)
        with self._lock:
            self._subscriptions.setdefault(kind, []).append(subscription)
        self._track(self._executor.submit(lambda: self._deliver(subscription, self.list(kind))))
        return subscription

    def notify(self, title: str, description: str) -> None:
        """Forward a message to the notification collaborator."""
        self.notifier.notify(title, description)

    # Lifecycle
    def flush(self, timeout: Optional[float] = None) -> None:
        """Wait until every write and snapshot queued so far has finished."""
        with self._lock:
            pending = list(self._pending)
        for future in pending:
            try:
                future.result(timeout)
            except StoreWriteFailure:
                # Already reported through the notifier.
                continue

    def close(self) -> None:
        """Flush pending writes and stop the worker."""
        if self._closed:
            return
        self.flush()
        self._executor.shutdown(wait=True)
        self._closed = True

    def __enter__(self) -> "RecordGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _schedule(
        self, operation: str, kind: EntityKind, record_id: str, write: Callable[[], None]
    ) -> PendingWrite:
        if self._closed:
            raise RuntimeError("Gateway is closed")

        def run() -> None:
            try:
                write()
            except Exception as exc:
                logger.exception(
                    "Write failed: %s %s/%s", operation, kind.collection_path(self.user_id), record_id
                )
                failure = StoreWriteFailure(operation, kind.label, record_id, exc)
                self.notifier.notify(f"{kind.label.capitalize()} {operation} failed", str(failure))
                raise failure from exc
            logger.debug("Write applied: %s %s/%s", operation, kind.collection_path(self.user_id), record_id)
            self._publish(kind)

        logger.debug("Write scheduled: %s %s/%s", operation, kind.collection_path(self.user_id), record_id)
        future = self._track(self._executor.submit(run))
        return PendingWrite(operation=operation, kind=kind, record_id=record_id, future=future)

    def _track(self, future: Future) -> Future:
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _publish(self, kind: EntityKind) -> None:
        with self._lock:
            subscriptions = list(self._subscriptions.get(kind, ()))
        if not subscriptions:
            return
        snapshot = self.list(kind)
        for subscription in subscriptions:
            self._deliver(subscription, snapshot)

    def _deliver(self, subscription: Subscription, snapshot: list[Record]) -> None:
        if not subscription.active:
            return
        try:
            subscription.listener(list(snapshot))
        except Exception:
            # Listener errors are logged and stop there.
            logger.exception("Listener for %s raised", subscription.kind.value)

    def _unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            listeners = self._subscriptions.get(subscription.kind, [])
            if subscription in listeners:
                listeners.remove(subscription)

    def _require(self, kind: EntityKind, record_id: str) -> None:
        if self.store.get(kind, self.user_id, record_id) is None:
            raise NotFoundError(record_not_found(kind.label, record_id))
