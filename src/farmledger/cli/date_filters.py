"""CLI helpers for date range resolution."""

from datetime import date

import click

from farmledger.domain.reporting import TimeRange, resolve_interval
from farmledger.utils.date_parser import parse_date

RANGE_FLAGS = {
    "weekly": TimeRange.WEEKLY,
    "monthly": TimeRange.MONTHLY,
    "three-months": TimeRange.THREE_MONTHS,
}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    today: date | None = None,
    default_range: TimeRange = TimeRange.MONTHLY,
) -> tuple[date, date]:
    """Resolve CLI date range from time-range flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--weekly, --monthly, --three-months) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--weekly, --monthly, --three-months) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if bool(start_date) != bool(end_date):
        click.echo("Error: --start-date and --end-date must be given together.", err=True)
        ctx.exit(1)

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                return resolve_interval(RANGE_FLAGS[period], today=today)

    if start_date and end_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)
        if end < start:
            click.echo("Error: --end-date cannot be before --start-date.", err=True)
            ctx.exit(1)
        return resolve_interval(start=start, end=end, today=today)

    return resolve_interval(default_range, today=today)
