"""Interval summary command."""

import click
from farmledger.cli.date_filters import resolve_cli_date_range
from farmledger.cli.series_resolution import (
    build_series_or_exit,
    resolve_reference_date_or_exit,
    series_options,
)
from farmledger.domain.reporting import (
    FinancialMetric,
    select_interval,
    summarize_interval,
)


@click.command("summary")
@series_options
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--weekly", is_flag=True, help="Last 7 days ending on the reference date")
@click.option("--monthly", is_flag=True, help="Calendar month of the reference date (default)")
@click.option("--three-months", is_flag=True, help="Current and previous two calendar months")
@click.pass_context
def summary(
    ctx,
    user: str,
    domain: str,
    occupation: str | None,
    days: int,
    reference_date: str | None,
    start_date: str | None,
    end_date: str | None,
    weekly: bool,
    monthly: bool,
    three_months: bool,
):
    """Show metric totals over an interval, broken down by occupation."""
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
    entries = select_interval(result.entries, start, end, result.occupations)

    click.echo(f"Financial Summary ({start.isoformat()} to {end.isoformat()})")
    click.echo("=" * 70)

    for metric in FinancialMetric:
        totals = summarize_interval(entries, metric, result.occupations)
        click.echo()
        click.echo(f"{metric.label:<50} {totals.total:>19,.2f}")
        for item in totals.breakdown:
            click.echo(f"    {item.name:<46} {item.value:>19,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
