"""Expense category commands."""

import click
from farmledger.cli.error_handling import handle_domain_error
from farmledger.domain.classification import classify
from farmledger.domain.entities import ExpenseType
from farmledger.domain.errors import DomainError
from farmledger.domain.expense_categories import get_expense_config


@click.command("categories")
@click.option(
    "--domain",
    default="generic",
    show_default=True,
    help="Expense category preset (generic, poultry, fishery, apiculture)",
)
@click.option("--classify", "category", help="Show how one category is classified")
@click.pass_context
def categories(ctx, domain: str, category: str | None):
    """Show an expense category preset or classify a category."""
    try:
        config = get_expense_config(domain)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if category is not None:
        expense_type = classify(category, config)
        if expense_type is None:
            click.echo(f"'{category}' is not recognized by '{config.name}' and is excluded from totals")
        else:
            label = "COGS" if expense_type is ExpenseType.COGS else "Operating expense"
            click.echo(f"'{category}' -> {label}")
        return

    click.echo(f"Expense categories ({config.name})")
    for main_group, sub_categories in config.detailed_categories.items():
        if main_group == config.cogs_group:
            role = "COGS"
        elif main_group == config.operating_group:
            role = "Operating expenses"
        else:
            role = "Ignored"
        click.echo()
        click.echo(f"{main_group} [{role}]")
        for sub_category in sub_categories:
            click.echo(f"    {sub_category}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(categories)
