"""Revenue commands."""

from decimal import Decimal

import click

from bizdash.cli.date_filters import resolve_cli_date_range
from bizdash.cli.error_handling import (
    format_day,
    format_money,
    get_gateway,
    handle_domain_error,
    wait_for_write,
)
from bizdash.domain.errors import DomainError
from bizdash.domain.revenue import RevenueService


@click.group()
def revenue_group():
    """Record and review revenue."""
    pass


@revenue_group.command("add")
@click.option("--amount", required=True, help="Amount received (e.g., 250.00)")
@click.option("--date", "date_str", default="today", show_default=True,
              help="Day received (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--description", help="What the revenue was for")
@click.pass_context
def add_revenue(ctx, amount: str, date_str: str, description: str | None):
    """Record revenue."""
    service = RevenueService(get_gateway(ctx))
    try:
        pending = service.create_revenue(amount=amount, date=date_str, description=description)
    except DomainError as e:
        handle_domain_error(ctx, e)
    wait_for_write(ctx, pending)
    click.echo(f"Created revenue record (ID: {pending.record_id})")


@revenue_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Only the current month")
@click.option("--last-month", is_flag=True, help="Only the previous month")
@click.option("--this-year", is_flag=True, help="Only the current year")
@click.option("--last-year", is_flag=True, help="Only the previous year")
@click.pass_context
def list_revenues(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
):
    """List revenue records, optionally limited to a date range or period."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )

    revenues = RevenueService(get_gateway(ctx)).list_revenues(start_date=start, end_date=end)
    if not revenues:
        click.echo("No revenue found.")
        return

    click.echo(f"\n{'ID':<34} {'Date':<12} {'Amount':>12}  Description")
    click.echo("-" * 90)
    for r in revenues:
        click.echo(f"{r.id:<34} {format_day(r.date):<12} {format_money(r.amount):>12}  {r.description or ''}")
    total = sum((r.amount for r in revenues), Decimal("0"))
    click.echo("-" * 90)
    click.echo(f"{'Total':<47} {format_money(total):>12}")


@revenue_group.command("update")
@click.argument("revenue_id")
@click.option("--amount", help="New amount")
@click.option("--date", "date_str", help="New date")
@click.option("--description", help="New description")
@click.pass_context
def update_revenue(ctx, revenue_id: str, amount: str | None, date_str: str | None, description: str | None):
    """Update a revenue record."""
    if amount is None and date_str is None and description is None:
        click.echo("Error: Nothing to update. Use --amount, --date and/or --description.", err=True)
        ctx.exit(1)
    service = RevenueService(get_gateway(ctx))
    try:
        pending = service.update_revenue(
            revenue_id, amount=amount, date=date_str, description=description
        )
        wait_for_write(ctx, pending)
    except DomainError as e:
        handle_domain_error(ctx, e)


@revenue_group.command("delete")
@click.argument("revenue_id")
@click.pass_context
def delete_revenue(ctx, revenue_id: str):
    """Delete a revenue record."""
    service = RevenueService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.delete_revenue(revenue_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register revenue commands with main CLI."""
    cli.add_command(revenue_group, name="revenue")
