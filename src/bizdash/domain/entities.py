"""Domain model entities for bizdash.

These are pure data classes representing business records, independent of
the database schema. Every record belongs to exactly one user collection;
the owning user is implied by the gateway that produced it and is not part
of the entity itself.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class EntityKind(str, Enum):
    """The five per-user record collections."""

    CLIENT = "clients"
    PROJECT = "projects"
    SERVICE = "services"
    REVENUE = "revenues"
    EXPENSE = "expenses"

    @property
    def label(self) -> str:
        """Singular, human-readable name of the kind."""
        return {
            EntityKind.CLIENT: "client",
            EntityKind.PROJECT: "project",
            EntityKind.SERVICE: "service",
            EntityKind.REVENUE: "revenue",
            EntityKind.EXPENSE: "expense",
        }[self]

    def collection_path(self, user_id: str) -> str:
        """Return the user-scoped path of this collection."""
        return f"users/{user_id}/{self.value}"


@dataclass(frozen=True)
class Client:
    """Client domain entity."""

    id: str
    name: str
    phone: Optional[str] = None


@dataclass(frozen=True)
class Project:
    """Project domain entity.

    ``start_date`` is stamped by the store when the project is created and
    never changes afterwards. ``end_date`` is the delivery date, if any.
    """

    id: str
    name: str
    start_date: datetime
    description: Optional[str] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class Service:
    """Service offering domain entity."""

    id: str
    name: str
    price: Decimal
    description: Optional[str] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class Revenue:
    """Revenue record domain entity."""

    id: str
    amount: Decimal
    date: datetime
    description: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    """Expense record domain entity."""

    id: str
    category: str
    amount: Decimal


Record = Union[Client, Project, Service, Revenue, Expense]


@dataclass(frozen=True)
class Delivery:
    """A project or service due on a given calendar day."""

    kind: EntityKind
    record: Union[Project, Service]

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class TipSplit:
    """Result of splitting a bill and its tip between people."""

    bill: Decimal
    tip_percent: Decimal
    num_people: int
    total_tip: Decimal
    grand_total: Decimal
    subtotal_per_person: Decimal
    tip_per_person: Decimal
    total_per_person: Decimal

    @property
    def is_shared(self) -> bool:
        """Per-person figures are only worth showing for more than one person."""
        return self.num_people > 1


@dataclass(frozen=True)
class MonthlyRevenue:
    """Revenue total for one calendar month."""

    year: int
    month: int
    total: Decimal

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for one category."""

    category: str
    total: Decimal
