"""Dashboard report data: service prices, monthly revenue, expense breakdown."""

from datetime import tzinfo
from decimal import Decimal
from typing import Iterable, Optional

from bizdash.database.gateway import RecordGateway
from bizdash.domain.entities import (
    CategoryTotal,
    EntityKind,
    Expense,
    MonthlyRevenue,
    Revenue,
    Service,
)
from bizdash.utils.date_parser import to_local_date


def rank_services_by_price(services: Optional[Iterable[Service]]) -> list[tuple[str, Decimal]]:
    """Return (name, price) rows, most expensive first."""
    ranked = sorted(services or (), key=lambda service: service.price, reverse=True)
    return [(service.name, service.price) for service in ranked]


def revenue_by_month(
    revenues: Optional[Iterable[Revenue]], zone: Optional[tzinfo] = None
) -> list[MonthlyRevenue]:
    """Total revenue per calendar month, oldest month first."""
    totals: dict[tuple[int, int], Decimal] = {}
    for revenue in revenues or ():
        day = to_local_date(revenue.date, zone)
        key = (day.year, day.month)
        totals[key] = totals.get(key, Decimal("0")) + revenue.amount
    return [
        MonthlyRevenue(year=year, month=month, total=total)
        for (year, month), total in sorted(totals.items())
    ]


def expense_breakdown(expenses: Optional[Iterable[Expense]]) -> list[CategoryTotal]:
    """Total expense per category, in order of first appearance."""
    totals: dict[str, Decimal] = {}
    for expense in expenses or ():
        totals[expense.category] = totals.get(expense.category, Decimal("0")) + expense.amount
    return [CategoryTotal(category=category, total=total) for category, total in totals.items()]


class DashboardService:
    """Builds the dashboard chart data from the user's live collections."""

    def __init__(self, gateway: RecordGateway, zone: Optional[tzinfo] = None):
        """Initialize dashboard service.

        Args:
            gateway: Record gateway scoped to the signed-in user
            zone: Calendar timezone for month grouping (defaults to local)
        """
        self.gateway = gateway
        self.zone = zone

    def service_profitability(self) -> list[tuple[str, Decimal]]:
        return rank_services_by_price(self.gateway.list(EntityKind.SERVICE))

    def monthly_revenue(self) -> list[MonthlyRevenue]:
        return revenue_by_month(self.gateway.list(EntityKind.REVENUE), self.zone)

    def expense_breakdown(self) -> list[CategoryTotal]:
        return expense_breakdown(self.gateway.list(EntityKind.EXPENSE))
