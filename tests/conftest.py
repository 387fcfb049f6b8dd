"""Shared pytest fixtures for bizdash tests."""

import os
import tempfile
import threading

import pytest

from bizdash.database.factories import create_sqlite_store
from bizdash.database.gateway import RecordGateway
from bizdash.domain.client import ClientService
from bizdash.domain.expense import ExpenseService
from bizdash.domain.project import ProjectService
from bizdash.domain.reports import DashboardService
from bizdash.domain.revenue import RevenueService
from bizdash.domain.service_catalog import ServiceCatalog


class RecordingNotifier:
    """Keeps every notification in memory, in arrival order."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def notify(self, title: str, description: str) -> None:
        with self._lock:
            self.messages.append((title, description))

    @property
    def titles(self) -> list[str]:
        with self._lock:
            return [title for title, _ in self.messages]


class MemoryClipboard:
    """Holds the last copied text."""

    def __init__(self):
        self.text: str | None = None

    def copy(self, text: str) -> None:
        self.text = text


@pytest.fixture
def temp_db():
    """Create a temporary record store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def notifier():
    """Notifier that remembers every message."""
    return RecordingNotifier()


@pytest.fixture
def clipboard():
    """Clipboard that keeps the last copied text."""
    return MemoryClipboard()


@pytest.fixture
def gateway(temp_db, notifier):
    """Gateway for the default test user."""
    gateway = RecordGateway(temp_db, user_id="user-1", notifier=notifier)
    yield gateway
    gateway.close()


@pytest.fixture
def client_service(gateway):
    """Create a ClientService on the test gateway."""
    return ClientService(gateway)


@pytest.fixture
def project_service(gateway):
    """Create a ProjectService on the test gateway."""
    return ProjectService(gateway)


@pytest.fixture
def service_catalog(gateway):
    """Create a ServiceCatalog on the test gateway."""
    return ServiceCatalog(gateway)


@pytest.fixture
def revenue_service(gateway):
    """Create a RevenueService on the test gateway."""
    return RevenueService(gateway)


@pytest.fixture
def expense_service(gateway):
    """Create an ExpenseService on the test gateway."""
    return ExpenseService(gateway)


@pytest.fixture
def dashboard_service(gateway):
    """Create a DashboardService on the test gateway."""
    return DashboardService(gateway)


@pytest.fixture
def sample_client(client_service):
    """Create a sample client and wait until it is stored."""
    client_id = client_service.create_client(name="Ana Souza", phone="555-0101").result(timeout=5)
    return client_service.get_client(client_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
