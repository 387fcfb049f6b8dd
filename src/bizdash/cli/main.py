"""Main CLI entry point."""

import click

from bizdash.config import load_settings
from bizdash.logging_config import setup_logging

# Import and register all commands at module level
from bizdash.cli.commands import (
    calc,
    calendar,
    client,
    dashboard,
    expense,
    price,
    project,
    revenue,
    service,
    tip,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BIZDASH_DB_PATH environment variable)",
    envvar="BIZDASH_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="User whose records to work with (overrides BIZDASH_USER)",
    envvar="BIZDASH_USER",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides BIZDASH_LOG_LEVEL)",
)
@click.option("--quiet", "-q", is_flag=True, help="Do not print confirmation notices")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None, log_level: str | None, quiet: bool):
    """Bizdash - small-business dashboard.

    Keep track of clients, projects, services and revenue, see upcoming
    deliveries, and use the tip, pricing and arithmetic calculators.
    """
    ctx.ensure_object(dict)

    try:
        settings = load_settings(database_path=db_path, user_id=user_id, log_level=log_level)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    setup_logging(settings)
    ctx.obj["settings"] = settings
    ctx.obj["quiet"] = quiet


# Register all commands
client.register_commands(cli)
project.register_commands(cli)
service.register_commands(cli)
revenue.register_commands(cli)
expense.register_commands(cli)
calendar.register_commands(cli)
dashboard.register_commands(cli)
tip.register_commands(cli)
price.register_commands(cli)
calc.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
