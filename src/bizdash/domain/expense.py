"""Expense domain service (read-only)."""

from bizdash.database.gateway import RecordGateway
from bizdash.domain.entities import EntityKind, Expense


class ExpenseService:
    """Read access to the user's expense collection.

    Expenses are only ever read here, for the breakdown chart; nothing in
    the application creates, edits or deletes them.
    """

    def __init__(self, gateway: RecordGateway):
        self.gateway = gateway

    def list_expenses(self) -> list[Expense]:
        """List all expenses of the user."""
        return self.gateway.list(EntityKind.EXPENSE)
