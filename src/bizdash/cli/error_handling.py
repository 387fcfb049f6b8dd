"""CLI error handling and shared output helpers."""

from decimal import Decimal, ROUND_HALF_UP
from datetime import datetime
from typing import Optional

import click

from bizdash.collaborators import EchoNotifier
from bizdash.database.factories import create_sqlite_store
from bizdash.database.gateway import PendingWrite, RecordGateway
from bizdash.domain.errors import DomainError, StoreWriteFailure, ValidationError
from bizdash.utils.date_parser import to_local_date

CENT = Decimal("0.01")


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Validation errors list one line per offending field.
    """
    if isinstance(error, ValidationError) and len(error.errors) > 1:
        for field, message in error.errors.items():
            click.echo(f"Error: {field}: {message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def get_gateway(ctx: click.Context) -> RecordGateway:
    """Return the session's record gateway, opening the store on first use.

    Commands that never touch records (tip, price, calc) leave the database
    alone.
    """
    root = ctx.find_root()
    gateway = root.obj.get("gateway")
    if gateway is None:
        settings = root.obj["settings"]
        store = create_sqlite_store(database_path=settings.database_path)
        store.connect()
        store.initialize_schema()
        gateway = RecordGateway(
            store,
            user_id=settings.user_id,
            notifier=EchoNotifier(quiet=root.obj.get("quiet", False)),
        )
        root.obj["gateway"] = gateway
        # Callbacks run last-in first-out: pending writes land, then the store closes.
        root.call_on_close(store.disconnect)
        root.call_on_close(gateway.close)
    return gateway


def wait_for_write(ctx: click.Context, pending: PendingWrite) -> None:
    """Wait for a scheduled write and exit with failure if it did not land.

    The notifier has already printed the reason.
    """
    try:
        pending.result()
    except StoreWriteFailure:
        ctx.exit(1)


def format_money(amount: Decimal) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"${Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP):,}"


def format_day(timestamp: Optional[datetime]) -> str:
    """Format a timestamp as its local calendar date, or '-' when unset."""
    if timestamp is None:
        return "-"
    return to_local_date(timestamp).isoformat()
