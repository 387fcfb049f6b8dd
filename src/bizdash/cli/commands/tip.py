"""Tip splitter command."""

import click

from bizdash.cli.error_handling import format_money, handle_domain_error
from bizdash.domain.errors import DomainError
from bizdash.domain.tip import split_tip


@click.command("tip")
@click.option("--bill", required=True, help="Bill amount (e.g., 100.00)")
@click.option("--tip", "tip_percent", default="15", show_default=True, help="Tip percentage (0-100)")
@click.option("--people", default="1", show_default=True, help="Number of people sharing the bill")
@click.pass_context
def tip_command(ctx, bill: str, tip_percent: str, people: str):
    """Split a bill and its tip between people."""
    try:
        split = split_tip(bill, tip_percent, people)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Tip ({split.tip_percent}%):   {format_money(split.total_tip):>12}")
    click.echo(f"Grand total:  {format_money(split.grand_total):>12}")
    if split.is_shared:
        click.echo(f"\nPer person ({split.num_people} people):")
        click.echo(f"  Subtotal:   {format_money(split.subtotal_per_person):>12}")
        click.echo(f"  Tip:        {format_money(split.tip_per_person):>12}")
        click.echo(f"  Total:      {format_money(split.total_per_person):>12}")


def register_commands(cli):
    """Register tip command with main CLI."""
    cli.add_command(tip_command)
