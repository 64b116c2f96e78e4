"""Metric comparison command."""

import click
from farmledger.cli.date_filters import resolve_cli_date_range
from farmledger.cli.series_resolution import (
    build_series_or_exit,
    resolve_reference_date_or_exit,
    series_options,
)
from farmledger.domain.reporting import (
    FinancialMetric,
    compare_metrics,
    page_count,
    paginate,
    select_interval,
)


def _parse_metric_or_exit(ctx, value: str) -> FinancialMetric:
    try:
        return FinancialMetric.parse(value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command("compare")
@series_options
@click.option("--first", "first_metric", default="revenue", show_default=True, help="First metric")
@click.option("--second", "second_metric", default="cogs", show_default=True, help="Second metric")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--weekly", is_flag=True, help="Last 7 days ending on the reference date")
@click.option("--monthly", is_flag=True, help="Calendar month of the reference date (default)")
@click.option("--three-months", is_flag=True, help="Current and previous two calendar months")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page of 7 days")
@click.pass_context
def compare(
    ctx,
    user: str,
    domain: str,
    occupation: str | None,
    days: int,
    reference_date: str | None,
    first_metric: str,
    second_metric: str,
    start_date: str | None,
    end_date: str | None,
    weekly: bool,
    monthly: bool,
    three_months: bool,
    page: int,
):
    """Compare two metrics day by day (absolute values).

    Examples:
        farmledger compare --user alice --first revenue --second "net profit" --weekly
    """
    first = _parse_metric_or_exit(ctx, first_metric)
    second = _parse_metric_or_exit(ctx, second_metric)
    end_of_window = resolve_reference_date_or_exit(ctx, reference_date)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"weekly": weekly, "monthly": monthly, "three-months": three_months},
        today=end_of_window,
    )
    result = build_series_or_exit(
        ctx,
        user=user,
        domain=domain,
        occupation=occupation,
        days=days,
        reference_date=end_of_window,
    )

    rows = compare_metrics(
        select_interval(result.entries, start, end, result.occupations), first, second
    )
    pages = page_count(len(rows))
    click.echo(f"{first.label} vs {second.label} ({start.isoformat()} to {end.isoformat()})")
    click.echo(f"{'Date':<12} {first.label:>16} {second.label:>16}")
    click.echo("-" * 46)
    for row in paginate(rows, page - 1):
        click.echo(f"{row.date.isoformat():<12} {row.first:>16,.2f} {row.second:>16,.2f}")
    click.echo(f"Page {page} of {pages}")


def register_commands(cli):
    """Register compare command with main CLI."""
    cli.add_command(compare)
