"""Daily financial series command."""

import click
from farmledger.cli.series_resolution import (
    build_series_or_exit,
    resolve_reference_date_or_exit,
    series_options,
)
from farmledger.domain.reporting import FinancialMetric, trend_rows

COLUMN_WIDTH = 14


def _is_empty(entry) -> bool:
    return all(metric.of(entry).total == 0 for metric in FinancialMetric)


@click.command("series")
@series_options
@click.option(
    "--metric",
    help="Show one metric broken down by occupation instead of all totals",
)
@click.option("--all-days", is_flag=True, help="Include days without any activity")
@click.pass_context
def series(
    ctx,
    user: str,
    domain: str,
    occupation: str | None,
    days: int,
    reference_date: str | None,
    metric: str | None,
    all_days: bool,
):
    """Show the daily financial series for a user.

    Examples:
        farmledger series --user alice --days 30
        farmledger series --user alice --domain poultry --occupation Poultry --metric "net profit"
    """
    selected_metric = None
    if metric is not None:
        try:
            selected_metric = FinancialMetric.parse(metric)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    end = resolve_reference_date_or_exit(ctx, reference_date)
    result = build_series_or_exit(
        ctx,
        user=user,
        domain=domain,
        occupation=occupation,
        days=days,
        reference_date=end,
    )

    entries = [e for e in result.entries if all_days or not _is_empty(e)]
    click.echo(f"Financial series ({domain}, {days} days ending {end.isoformat()})")
    click.echo("=" * 80)

    if not entries:
        click.echo("No activity in this window.")
        return

    if selected_metric is None:
        columns = [m.label for m in FinancialMetric]
    else:
        columns = list(result.occupations) + ["Total"]
        click.echo(f"Metric: {selected_metric.label}")

    header = f"{'Date':<12}" + "".join(f"{c:>{COLUMN_WIDTH}}" for c in columns)
    click.echo(header)
    click.echo("-" * len(header))

    if selected_metric is None:
        rows = [(e.date, [m.of(e).total for m in FinancialMetric]) for e in entries]
    else:
        totals = [selected_metric.of(e).total for e in entries]
        rows = [
            (day, [*values, total])
            for (day, values), total in zip(
                trend_rows(entries, selected_metric, result.occupations), totals
            )
        ]

    for day, values in rows:
        row = "".join(f"{v:>{COLUMN_WIDTH},.2f}" for v in values)
        click.echo(f"{day.isoformat():<12}{row}")


def register_commands(cli):
    """Register series command with main CLI."""
    cli.add_command(series)
