"""Expense commands (read-only)."""

import click

from bizdash.cli.error_handling import format_money, get_gateway
from bizdash.domain.expense import ExpenseService


@click.group()
def expense_group():
    """Review expenses."""
    pass


@expense_group.command("list")
@click.pass_context
def list_expenses(ctx):
    """List all expenses."""
    expenses = ExpenseService(get_gateway(ctx)).list_expenses()
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\n{'Category':<30} {'Amount':>12}")
    click.echo("-" * 43)
    for e in expenses:
        click.echo(f"{e.category[:30]:<30} {format_money(e.amount):>12}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
