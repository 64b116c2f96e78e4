"""Add single sale or expense commands."""

import click
from farmledger.cli.error_handling import handle_domain_error
from farmledger.cli.series_resolution import resolve_user_or_exit
from farmledger.domain.aggregation import resolve_occupation, sale_total
from farmledger.domain.entities import ExpenseRecord, SaleRecord
from farmledger.domain.errors import DomainError
from farmledger.utils.amount_parser import parse_amount
from farmledger.utils.date_parser import parse_date


def _parse_date_or_exit(ctx, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _parse_amounts_or_exit(ctx, values: tuple[str, ...], label: str) -> list[float]:
    amounts = []
    for value in values:
        try:
            amounts.append(float(parse_amount(value)))
        except ValueError as e:
            click.echo(f"Error: Invalid {label}: {e}", err=True)
            ctx.exit(1)
    return amounts


@click.command("add-sale")
@click.option("--user", required=True, help="User name or ID")
@click.option(
    "--date",
    "sale_date",
    required=True,
    help="Sale date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--occupation", help="Occupation the sale belongs to (e.g. Poultry)")
@click.option("--item", "items", multiple=True, required=True, help="Item sold (repeatable)")
@click.option("--quantity", "quantities", multiple=True, required=True, help="Quantity per item (repeatable)")
@click.option("--price", "prices", multiple=True, help="Price per unit per item (repeatable)")
@click.pass_context
def add_sale(
    ctx,
    user: str,
    sale_date: str,
    occupation: str | None,
    items: tuple[str, ...],
    quantities: tuple[str, ...],
    prices: tuple[str, ...],
):
    """Add a sale manually.

    Examples:
        farmledger add-sale --user alice --date today --occupation Poultry --item Eggs --quantity 10 --price 5
    """
    db = ctx.obj["db"]
    profile = resolve_user_or_exit(ctx, user)
    parsed_date = _parse_date_or_exit(ctx, sale_date)
    parsed_quantities = _parse_amounts_or_exit(ctx, quantities, "quantity")
    parsed_prices = _parse_amounts_or_exit(ctx, prices, "price")

    if not (len(items) == len(parsed_quantities) == len(parsed_prices)):
        click.echo(
            "Warning: items, quantities and prices differ in length; the sale will total 0.",
            err=True,
        )

    sale = SaleRecord(
        sale_date=parsed_date,
        occupation=occupation,
        items_sold=items,
        quantities_sold=tuple(parsed_quantities),
        prices_per_unit=tuple(parsed_prices) if parsed_prices else None,
    )
    try:
        sale_row_id = db.add_sale(profile.id, sale)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created sale {sale_row_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Occupation: {resolve_occupation(occupation)}")
    click.echo(f"  Total: {sale_total(sale):,.2f}")


@click.command("add-expense")
@click.option("--user", required=True, help="User name or ID")
@click.option(
    "--date",
    "expense_date",
    required=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--category", required=True, help="Expense category (e.g. Electricity)")
@click.option("--amount", required=True, help="Expense amount (e.g. 200 or 1,250.50)")
@click.option("--occupation", help="Occupation the expense belongs to (e.g. Poultry)")
@click.pass_context
def add_expense(
    ctx,
    user: str,
    expense_date: str,
    category: str,
    amount: str,
    occupation: str | None,
):
    """Add an expense manually.

    Examples:
        farmledger add-expense --user alice --date today --category Electricity --amount 200
    """
    db = ctx.obj["db"]
    profile = resolve_user_or_exit(ctx, user)
    parsed_date = _parse_date_or_exit(ctx, expense_date)
    (parsed_amount,) = _parse_amounts_or_exit(ctx, (amount,), "amount")

    expense = ExpenseRecord(
        date_created=parsed_date,
        category=category,
        amount=parsed_amount,
        occupation=occupation,
    )
    try:
        expense_row_id = db.add_expense(profile.id, expense)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created expense {expense_row_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Category: {category}")
    click.echo(f"  Amount: {parsed_amount:,.2f}")


def register_commands(cli):
    """Register add commands with main CLI."""
    cli.add_command(add_sale)
    cli.add_command(add_expense)
