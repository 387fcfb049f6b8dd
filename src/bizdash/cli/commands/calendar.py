"""Delivery calendar commands."""

from collections import Counter

import click

from bizdash.cli.error_handling import get_gateway
from bizdash.domain.calendar import deliveries_on, delivery_days
from bizdash.domain.entities import EntityKind
from bizdash.domain.project import ProjectService
from bizdash.domain.service_catalog import ServiceCatalog
from bizdash.utils.date_parser import parse_date


def _load(ctx):
    gateway = get_gateway(ctx)
    return ProjectService(gateway).list_projects(), ServiceCatalog(gateway).list_services()


@click.group()
def calendar_group():
    """See when projects and services are due."""
    pass


@calendar_group.command("days")
@click.pass_context
def list_days(ctx):
    """List every day with at least one delivery."""
    projects, services = _load(ctx)
    counts = Counter(delivery_days(projects, services))
    if not counts:
        click.echo("No deliveries scheduled.")
        return

    click.echo(f"\n{'Day':<12} {'Deliveries':>10}")
    click.echo("-" * 23)
    for day in sorted(counts):
        click.echo(f"{day.isoformat():<12} {counts[day]:>10}")


@calendar_group.command("day")
@click.argument("day", default="today")
@click.pass_context
def show_day(ctx, day: str):
    """Show the projects and services due on DAY (default: today)."""
    try:
        selected = parse_date(day)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    projects, services = _load(ctx)
    deliveries = deliveries_on(selected, projects, services)
    if not deliveries:
        click.echo(f"No deliveries on {selected.isoformat()}.")
        return

    click.echo(f"\nDeliveries on {selected.isoformat()}:")
    for delivery in deliveries:
        tag = "Project" if delivery.kind == EntityKind.PROJECT else "Service"
        click.echo(f"  [{tag}] {delivery.name}")


def register_commands(cli):
    """Register calendar commands with main CLI."""
    cli.add_command(calendar_group, name="calendar")
