"""Mapper functions to convert SQLAlchemy rows into domain entities.

The store keeps timestamps as naive UTC; domain entities always carry
timezone-aware timestamps so calendar-day comparisons can move them into
the local zone.
"""

from datetime import datetime, UTC
from typing import Optional

from bizdash.domain import entities as domain
from bizdash.domain.entities import EntityKind
from bizdash.database.models import (
    Base,
    Client as ORMClient,
    Project as ORMProject,
    Service as ORMService,
    Revenue as ORMRevenue,
    Expense as ORMExpense,
)


def to_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a naive stored timestamp."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def to_stored(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a timestamp to the naive UTC form the store keeps."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        phone=orm_client.phone,
    )


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        name=orm_project.name,
        description=orm_project.description,
        start_date=to_aware(orm_project.start_date),
        end_date=to_aware(orm_project.end_date),
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        name=orm_service.name,
        price=orm_service.price,
        description=orm_service.description,
        end_date=to_aware(orm_service.end_date),
    )


def revenue_to_domain(orm_revenue: ORMRevenue) -> domain.Revenue:
    """Convert SQLAlchemy Revenue model to domain Revenue entity."""
    return domain.Revenue(
        id=orm_revenue.id,
        amount=orm_revenue.amount,
        date=to_aware(orm_revenue.date),
        description=orm_revenue.description,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        category=orm_expense.category,
        amount=orm_expense.amount,
    )


ORM_MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.CLIENT: ORMClient,
    EntityKind.PROJECT: ORMProject,
    EntityKind.SERVICE: ORMService,
    EntityKind.REVENUE: ORMRevenue,
    EntityKind.EXPENSE: ORMExpense,
}

TO_DOMAIN = {
    EntityKind.CLIENT: client_to_domain,
    EntityKind.PROJECT: project_to_domain,
    EntityKind.SERVICE: service_to_domain,
    EntityKind.REVENUE: revenue_to_domain,
    EntityKind.EXPENSE: expense_to_domain,
}


def record_to_domain(kind: EntityKind, row: Base) -> domain.Record:
    """Convert any ORM row of the given kind to its domain entity."""
    return TO_DOMAIN[kind](row)
