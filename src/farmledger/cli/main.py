"""Main CLI entry point."""

import logging

import click
from farmledger.database.factories import create_sqlite_database

# Import and register all commands at module level
from farmledger.cli.commands import (
    user,
    import_cmd,
    add,
    categories,
    series,
    summary,
    compare,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FARMLEDGER_DB_PATH environment variable)",
    envvar="FARMLEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Farmledger - Farm finance dashboards from sales and expense records.

    Import sales and expenses per user, then view daily revenue, COGS,
    gross profit, operating expenses and net profit broken down by
    occupation (Poultry, Apiculture, Fishery, ...).
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
import_cmd.register_commands(cli)
add.register_commands(cli)
categories.register_commands(cli)
series.register_commands(cli)
summary.register_commands(cli)
compare.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
