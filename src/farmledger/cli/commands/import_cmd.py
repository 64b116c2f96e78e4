"""Import command."""

import click
from farmledger.cli.error_handling import handle_domain_error
from farmledger.cli.series_resolution import resolve_user_or_exit
from farmledger.domain.errors import DomainError
from farmledger.domain.records_import import RecordImportService


@click.command("import")
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--user", required=True, help="User name or ID")
@click.pass_context
def import_records(ctx, json_file: str, user: str):
    """Import sales and expenses from a backend JSON payload.

    The file may contain "sales" and/or "expenses" arrays and a "user"
    object whose "sub_type" replaces the declared occupations.
    """
    profile = resolve_user_or_exit(ctx, user)
    service = RecordImportService(ctx.obj["db"])
    try:
        result = service.import_file(json_file, profile.id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported {result['imported_sales']} sales and {result['imported_expenses']} expenses")
    if result["skipped"] > 0:
        click.echo(f"Skipped {result['skipped']} already imported records")
    if result["occupations"] is not None:
        click.echo(f"Occupations: {', '.join(result['occupations']) or '-'}")
    if result["errors"]:
        click.echo(f"Errors: {len(result['errors'])}", err=True)
        for error in result["errors"]:
            click.echo(f"  {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_records)
