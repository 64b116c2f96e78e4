"""CLI helpers for loading a user's financial series."""

from __future__ import annotations

from datetime import date

import click

from farmledger.cli.error_handling import handle_domain_error
from farmledger.domain.entities import FinancialSeries, UserProfile
from farmledger.domain.errors import DomainError
from farmledger.domain.expense_categories import get_expense_config
from farmledger.domain.finance import FinanceService
from farmledger.domain.series import HISTORICAL_WINDOW_DAYS
from farmledger.domain.user import UserService
from farmledger.utils.date_parser import parse_date


def resolve_user_or_exit(ctx: click.Context, user: str) -> UserProfile:
    """Resolve a user name or ID, or exit with a CLI error."""
    try:
        return UserService(ctx.obj["db"]).resolve_user(user)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def resolve_reference_date_or_exit(ctx: click.Context, value: str | None) -> date:
    """Parse the --reference-date option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid reference date: {e}", err=True)
        ctx.exit(1)


def build_series_or_exit(
    ctx: click.Context,
    *,
    user: str,
    domain: str,
    occupation: str | None,
    days: int,
    reference_date: date,
) -> FinancialSeries:
    """Build the financial series for a user, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    profile = resolve_user_or_exit(ctx, user)
    try:
        config = get_expense_config(domain)
        return FinanceService(ctx.obj["db"]).build_series(
            profile.id,
            config,
            target_occupation=occupation,
            window_size_days=days,
            reference_date=reference_date,
        )
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def series_options(func):
    """Attach the options shared by every command that builds a series."""
    options = [
        click.option("--user", required=True, help="User name or ID"),
        click.option(
            "--domain",
            default="generic",
            show_default=True,
            help="Expense category preset (generic, poultry, fishery, apiculture)",
        ),
        click.option(
            "--occupation",
            help="Scope to one occupation's dashboard (e.g. Poultry)",
        ),
        click.option(
            "--days",
            type=click.IntRange(min=0),
            default=HISTORICAL_WINDOW_DAYS,
            show_default=True,
            help="Number of trailing days in the historical window",
        ),
        click.option(
            "--reference-date",
            help="Last day of the window (YYYY-MM-DD or relative like 'yesterday'); defaults to today",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
