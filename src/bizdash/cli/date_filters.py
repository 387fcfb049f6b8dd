"""CLI helpers for date range resolution."""

from datetime import date

import click

from bizdash.utils.date_parser import get_date_range, parse_date


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve an inclusive day range from one period flag or explicit dates.

    Exits with an error if more than one period is set, if a period is
    combined with explicit dates, or if a date cannot be parsed.
    """
    chosen = [period for period, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --this-year, --last-year) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if chosen and (start_date or end_date):
        click.echo(
            "Error: Period options cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if chosen:
        return get_date_range(chosen[0])

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)
    return start, end
