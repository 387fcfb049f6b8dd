"""Service catalog commands."""

import click

from bizdash.cli.error_handling import (
    format_day,
    format_money,
    get_gateway,
    handle_domain_error,
    wait_for_write,
)
from bizdash.domain.errors import DomainError
from bizdash.domain.service_catalog import ServiceCatalog


@click.group()
def service_group():
    """Manage the services you offer."""
    pass


@service_group.command("add")
@click.argument("name")
@click.option("--price", default="0", show_default=True, help="Price (e.g., 120.00)")
@click.option("--description", help="Service description")
@click.option("--end-date", help="Delivery date (YYYY-MM-DD or relative like 'tomorrow')")
@click.pass_context
def add_service(ctx, name: str, price: str, description: str | None, end_date: str | None):
    """Add a service."""
    catalog = ServiceCatalog(get_gateway(ctx))
    try:
        pending = catalog.create_service(
            name=name, price=price, description=description, end_date=end_date
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    wait_for_write(ctx, pending)
    click.echo(f"Created service '{name.strip()}' (ID: {pending.record_id})")


@service_group.command("list")
@click.pass_context
def list_services(ctx):
    """List all services."""
    services = ServiceCatalog(get_gateway(ctx)).list_services()
    if not services:
        click.echo("No services found. Add one with 'service add'.")
        return

    click.echo(f"\n{'ID':<34} {'Name':<30} {'Price':>12} {'Delivery':<12}")
    click.echo("-" * 90)
    for s in services:
        click.echo(
            f"{s.id:<34} {s.name[:30]:<30} {format_money(s.price):>12} {format_day(s.end_date):<12}"
        )


@service_group.command("update")
@click.argument("service_id")
@click.option("--name", help="New name")
@click.option("--price", help="New price")
@click.option("--description", help="New description")
@click.pass_context
def update_service(ctx, service_id: str, name: str | None, price: str | None, description: str | None):
    """Update a service's name, price or description."""
    if name is None and price is None and description is None:
        click.echo("Error: Nothing to update. Use --name, --price and/or --description.", err=True)
        ctx.exit(1)
    catalog = ServiceCatalog(get_gateway(ctx))
    try:
        pending = catalog.update_service(
            service_id, name=name, price=price, description=description
        )
        wait_for_write(ctx, pending)
    except DomainError as e:
        handle_domain_error(ctx, e)


@service_group.command("set-end-date")
@click.argument("service_id")
@click.argument("end_date", required=False)
@click.pass_context
def set_end_date(ctx, service_id: str, end_date: str | None):
    """Set a service's delivery date (omit END_DATE to clear it)."""
    catalog = ServiceCatalog(get_gateway(ctx))
    try:
        wait_for_write(ctx, catalog.set_end_date(service_id, end_date))
    except DomainError as e:
        handle_domain_error(ctx, e)


@service_group.command("delete")
@click.argument("service_id")
@click.pass_context
def delete_service(ctx, service_id: str):
    """Delete a service."""
    catalog = ServiceCatalog(get_gateway(ctx))
    try:
        wait_for_write(ctx, catalog.delete_service(service_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
