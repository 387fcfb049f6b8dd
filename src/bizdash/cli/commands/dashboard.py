"""Dashboard commands: text renditions of the three dashboard charts."""

from decimal import Decimal

import click

from bizdash.cli.error_handling import format_money, get_gateway
from bizdash.domain.reports import DashboardService

BAR_WIDTH = 30


def _bar(value: Decimal, largest: Decimal) -> str:
    if largest <= 0 or value <= 0:
        return ""
    return "#" * max(1, int(value / largest * BAR_WIDTH))


def _print_rows(rows: list[tuple[str, Decimal]], label: str) -> None:
    largest = max((value for _, value in rows), default=Decimal("0"))
    click.echo(f"\n{label:<30} {'Amount':>14}")
    click.echo("-" * (46 + BAR_WIDTH))
    for name, value in rows:
        click.echo(f"{name[:30]:<30} {format_money(value):>14}  {_bar(value, largest)}")


@click.group()
def dashboard_group():
    """Show dashboard charts."""
    pass


@dashboard_group.command("services")
@click.pass_context
def services_chart(ctx):
    """Service prices, most expensive first."""
    rows = DashboardService(get_gateway(ctx)).service_profitability()
    if not rows:
        click.echo("No services found.")
        return
    _print_rows(rows, "Service")


@dashboard_group.command("revenue")
@click.pass_context
def revenue_chart(ctx):
    """Revenue per month, oldest first."""
    months = DashboardService(get_gateway(ctx)).monthly_revenue()
    if not months:
        click.echo("No revenue found.")
        return
    _print_rows([(m.key, m.total) for m in months], "Month")


@dashboard_group.command("expenses")
@click.pass_context
def expenses_chart(ctx):
    """Expenses per category."""
    totals = DashboardService(get_gateway(ctx)).expense_breakdown()
    if not totals:
        click.echo("No expenses found.")
        return
    _print_rows([(t.category, t.total) for t in totals], "Category")
    grand_total = sum((t.total for t in totals), Decimal("0"))
    click.echo(f"{'Total':<30} {format_money(grand_total):>14}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard_group, name="dashboard")
