"""Tests for the fire-and-forget record gateway."""

import threading
from decimal import Decimal

import pytest

from bizdash.database.gateway import RecordGateway
from bizdash.domain.entities import EntityKind
from bizdash.domain.errors import NotFoundError, StoreWriteFailure


class TestWrites:
    """Tests for scheduled writes."""

    def test_create_returns_id_immediately(self, gateway):
        """The record id is known before the write lands."""
        pending = gateway.create(EntityKind.CLIENT, {"name": "Ana"})
        assert len(pending.record_id) == 32
        assert pending.result(timeout=5) == pending.record_id
        assert gateway.get(EntityKind.CLIENT, pending.record_id).name == "Ana"

    def test_ids_are_unique(self, gateway):
        """Every create gets a fresh id."""
        ids = {gateway.create(EntityKind.CLIENT, {"name": f"C{i}"}).record_id for i in range(5)}
        gateway.flush()
        assert len(ids) == 5

    def test_writes_apply_in_order(self, gateway):
        """Two quick updates to one record resolve last-write-wins."""
        record_id = gateway.create(EntityKind.CLIENT, {"name": "Ana"}).record_id
        gateway.update(EntityKind.CLIENT, record_id, {"name": "First"})
        gateway.update(EntityKind.CLIENT, record_id, {"name": "Second"})
        gateway.flush()
        assert gateway.get(EntityKind.CLIENT, record_id).name == "Second"

    def test_delete(self, gateway):
        """Deleted records are gone once the write lands."""
        record_id = gateway.create(EntityKind.CLIENT, {"name": "Ana"}).record_id
        gateway.delete(EntityKind.CLIENT, record_id).result(timeout=5)
        assert gateway.list(EntityKind.CLIENT) == []

    def test_users_are_isolated(self, temp_db):
        """Gateways for different users share a store but not records."""
        with RecordGateway(temp_db, "alice") as alice, RecordGateway(temp_db, "bob") as bob:
            alice.create(EntityKind.CLIENT, {"name": "Ana"}).result(timeout=5)
            assert bob.list(EntityKind.CLIENT) == []
            assert len(alice.list(EntityKind.CLIENT)) == 1

    def test_closed_gateway_rejects_writes(self, temp_db):
        """No writes are accepted after close."""
        gateway = RecordGateway(temp_db, "u1")
        gateway.close()
        with pytest.raises(RuntimeError):
            gateway.create(EntityKind.CLIENT, {"name": "Ana"})


class TestFailures:
    """Failed writes are reported, never raised at the call site."""

    def test_failed_update_notifies(self, gateway, notifier):
        """Updating a missing record fails in the background."""
        pending = gateway.update(EntityKind.CLIENT, "missing", {"name": "x"})
        with pytest.raises(StoreWriteFailure) as excinfo:
            pending.result(timeout=5)
        assert excinfo.value.operation == "update"
        assert excinfo.value.record_id == "missing"
        assert "Client update failed" in notifier.titles

    def test_failure_does_not_stop_later_writes(self, gateway, notifier):
        """The worker keeps going after a failure."""
        gateway.update(EntityKind.CLIENT, "missing", {"name": "x"})
        pending = gateway.create(EntityKind.CLIENT, {"name": "Ana"})
        pending.result(timeout=5)
        assert gateway.get(EntityKind.CLIENT, pending.record_id) is not None

    def test_flush_swallows_reported_failures(self, gateway, notifier):
        """flush waits for failed writes without raising."""
        gateway.delete(EntityKind.CLIENT, "missing")
        gateway.update(EntityKind.SERVICE, "missing", {"price": Decimal("1")})
        gateway.flush()
        assert notifier.titles == ["Client delete failed", "Service update failed"]

    def test_missing_record_is_a_failure(self, gateway, notifier):
        """Edits and deletes of unknown ids fail with a not-found cause."""
        pending = gateway.delete(EntityKind.PROJECT, "missing")
        failure = pending.exception(timeout=5)
        assert isinstance(failure.cause, NotFoundError)
        assert str(failure.cause) == "Project missing not found"

    def test_update_queued_behind_create(self, gateway, notifier):
        """An update scheduled before its create lands still finds the record."""
        record_id = gateway.create(EntityKind.CLIENT, {"name": "Ana"}).record_id
        gateway.update(EntityKind.CLIENT, record_id, {"phone": "555"}).result(timeout=5)
        assert gateway.get(EntityKind.CLIENT, record_id).phone == "555"
        assert notifier.titles == []

    def test_unknown_field_is_a_failure(self, gateway):
        """Field rejections by the store surface as write failures."""
        pending = gateway.create(EntityKind.CLIENT, {"name": "Ana", "email": "a@b.c"})
        assert isinstance(pending.exception(timeout=5), StoreWriteFailure)


class TestSubscriptions:
    """Live collection snapshots."""

    def test_subscribe_delivers_current_list(self, gateway):
        """The listener gets the current list first."""
        gateway.create(EntityKind.CLIENT, {"name": "Ana"}).result(timeout=5)
        snapshots = []
        gateway.subscribe(EntityKind.CLIENT, snapshots.append)
        gateway.flush()
        assert [[c.name for c in s] for s in snapshots] == [["Ana"]]

    def test_snapshot_after_each_write(self, gateway):
        """Every successful write pushes a full snapshot."""
        snapshots = []
        gateway.subscribe(EntityKind.CLIENT, snapshots.append)
        record_id = gateway.create(EntityKind.CLIENT, {"name": "Ana"}).record_id
        gateway.update(EntityKind.CLIENT, record_id, {"name": "Bia"})
        gateway.flush()
        assert [[c.name for c in s] for s in snapshots] == [[], ["Ana"], ["Bia"]]

    def test_first_snapshot_waits_for_queued_writes(self, gateway, temp_db, monkeypatch):
        """A write in flight while subscribing is never followed by an older list."""
        release = threading.Event()
        insert = temp_db.insert

        def slow_insert(*args):
            release.wait(5)
            insert(*args)

        monkeypatch.setattr(temp_db, "insert", slow_insert)
        gateway.create(EntityKind.CLIENT, {"name": "Ana"})
        snapshots = []
        gateway.subscribe(EntityKind.CLIENT, snapshots.append)
        assert snapshots == []
        release.set()
        gateway.flush()
        assert snapshots
        assert all([c.name for c in s] == ["Ana"] for s in snapshots)

    def test_other_collections_do_not_publish(self, gateway):
        """Writes only reach listeners of their own kind."""
        snapshots = []
        gateway.subscribe(EntityKind.PROJECT, snapshots.append)
        gateway.create(EntityKind.CLIENT, {"name": "Ana"}).result(timeout=5)
        assert snapshots == [[]]

    def test_failed_write_does_not_publish(self, gateway):
        """Listeners only hear about writes that landed."""
        snapshots = []
        gateway.subscribe(EntityKind.CLIENT, snapshots.append)
        gateway.update(EntityKind.CLIENT, "missing", {"name": "x"})
        gateway.flush()
        assert snapshots == [[]]

    def test_cancel(self, gateway):
        """Cancelled subscriptions get nothing more."""
        snapshots = []
        subscription = gateway.subscribe(EntityKind.CLIENT, snapshots.append)
        gateway.flush()
        subscription.cancel()
        subscription.cancel()
        gateway.create(EntityKind.CLIENT, {"name": "Ana"}).result(timeout=5)
        assert snapshots == [[]]

    def test_listener_error_is_contained(self, gateway):
        """A failing listener does not fail the write or other listeners."""
        seen = []
        calls = {"count": 0}

        def broken(snapshot):
            calls["count"] += 1
            if calls["count"] > 1:
                raise RuntimeError("boom")

        gateway.subscribe(EntityKind.CLIENT, broken)
        gateway.subscribe(EntityKind.CLIENT, seen.append)
        pending = gateway.create(EntityKind.CLIENT, {"name": "Ana"})
        assert pending.result(timeout=5) == pending.record_id
        assert len(seen[-1]) == 1

    def test_snapshots_arrive_on_worker_thread(self, gateway):
        """Every snapshot, the first one included, comes from the write worker."""
        threads = []
        gateway.subscribe(EntityKind.CLIENT, lambda s: threads.append(threading.current_thread().name))
        gateway.create(EntityKind.CLIENT, {"name": "Ana"}).result(timeout=5)
        assert len(threads) == 2
        assert all(name.startswith("bizdash-writes") for name in threads)

    def test_closed_gateway_rejects_subscriptions(self, temp_db):
        """No snapshots can be requested after close."""
        gateway = RecordGateway(temp_db, "u1")
        gateway.close()
        with pytest.raises(RuntimeError):
            gateway.subscribe(EntityKind.CLIENT, print)


def test_notify_forwards_to_notifier(temp_db, notifier):
    """Services send confirmations through the gateway."""
    with RecordGateway(temp_db, "u1", notifier=notifier) as gateway:
        gateway.notify("Client added", "Ana was added.")
    assert notifier.messages == [("Client added", "Ana was added.")]
