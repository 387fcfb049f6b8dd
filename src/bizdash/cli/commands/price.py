"""Price simulator command."""

import click

from bizdash.cli.error_handling import format_money, handle_domain_error
from bizdash.domain.errors import DomainError
from bizdash.domain.pricing import PriceSimulator


@click.command("price")
@click.option("--materials", "material_cost", required=True, help="Material cost (e.g., 50)")
@click.option("--hours", "labor_hours", required=True, help="Labor hours (e.g., 2.5)")
@click.pass_context
def price_command(ctx, material_cost: str, labor_hours: str):
    """Suggest a selling price from material cost and labor hours.

    The hourly rate and profit margin come from BIZDASH_HOURLY_RATE and
    BIZDASH_PROFIT_MARGIN (defaults 75 and 1.3).
    """
    settings = ctx.obj["settings"]
    simulator = PriceSimulator(hourly_rate=settings.hourly_rate, profit_margin=settings.profit_margin)
    try:
        price = simulator.suggest(material_cost, labor_hours)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Suggested price: {format_money(price)}")


def register_commands(cli):
    """Register price command with main CLI."""
    cli.add_command(price_command)
