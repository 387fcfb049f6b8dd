"""Tests for database mappers."""

from datetime import datetime, timedelta, timezone, UTC
from decimal import Decimal

from bizdash.database.mappers import (
    client_to_domain,
    expense_to_domain,
    project_to_domain,
    record_to_domain,
    revenue_to_domain,
    service_to_domain,
    to_aware,
    to_stored,
)
from bizdash.database.models import (
    Client as ORMClient,
    Expense as ORMExpense,
    Project as ORMProject,
    Revenue as ORMRevenue,
    Service as ORMService,
)
from bizdash.domain.entities import Client, EntityKind, Expense, Project, Revenue, Service


class TestTimestampConversion:
    """Tests for stored timestamp conversion."""

    def test_to_stored_converts_to_naive_utc(self):
        """Aware timestamps are shifted to UTC and made naive."""
        local = datetime(2024, 5, 10, 21, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert to_stored(local) == datetime(2024, 5, 11, 0, 0)

    def test_to_aware_attaches_utc(self):
        """Naive stored timestamps are read back as UTC."""
        assert to_aware(datetime(2024, 5, 11, 0, 0)) == datetime(2024, 5, 11, 0, 0, tzinfo=UTC)

    def test_none_passes_through(self):
        """Unset timestamps stay unset."""
        assert to_stored(None) is None
        assert to_aware(None) is None


class TestEntityMappers:
    """Tests for ORM to domain conversion."""

    def test_client_to_domain(self):
        """Test converting ORM Client to domain Client."""
        orm_client = ORMClient(id="c1", user_id="u1", name="Ana", phone="555")
        client = client_to_domain(orm_client)
        assert isinstance(client, Client)
        assert client == Client(id="c1", name="Ana", phone="555")

    def test_project_to_domain(self):
        """Project timestamps come back aware."""
        orm_project = ORMProject(
            id="p1",
            user_id="u1",
            name="Website",
            start_date=datetime(2024, 1, 1, 12, 0),
            end_date=None,
        )
        project = project_to_domain(orm_project)
        assert isinstance(project, Project)
        assert project.start_date == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert project.end_date is None

    def test_service_to_domain(self):
        """Test converting ORM Service to domain Service."""
        orm_service = ORMService(id="s1", user_id="u1", name="Logo", price=Decimal("350.00"))
        service = service_to_domain(orm_service)
        assert isinstance(service, Service)
        assert service.price == Decimal("350.00")

    def test_revenue_to_domain(self):
        """Test converting ORM Revenue to domain Revenue."""
        orm_revenue = ORMRevenue(
            id="r1", user_id="u1", amount=Decimal("99.90"), date=datetime(2024, 3, 5, 3, 0)
        )
        revenue = revenue_to_domain(orm_revenue)
        assert isinstance(revenue, Revenue)
        assert revenue.date.tzinfo is not None

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain Expense."""
        orm_expense = ORMExpense(id="e1", user_id="u1", category="Rent", amount=Decimal("800"))
        assert expense_to_domain(orm_expense) == Expense(id="e1", category="Rent", amount=Decimal("800"))

    def test_record_to_domain_dispatches_on_kind(self):
        """The kind picks the mapper."""
        orm_client = ORMClient(id="c1", user_id="u1", name="Ana")
        assert record_to_domain(EntityKind.CLIENT, orm_client) == Client(id="c1", name="Ana")
