"""User management commands."""

import click
from farmledger.cli.error_handling import handle_domain_error
from farmledger.cli.series_resolution import resolve_user_or_exit
from farmledger.domain.errors import DomainError
from farmledger.domain.user import UserService


@click.group()
def user():
    """Manage users and their declared occupations."""
    pass


@user.command("create")
@click.argument("name")
@click.option(
    "--occupation",
    "occupations",
    multiple=True,
    help="Declared occupation (repeatable, e.g. --occupation Poultry)",
)
@click.pass_context
def create_user(ctx, name: str, occupations: tuple[str, ...]):
    """Create a new user."""
    service = UserService(ctx.obj["db"])
    try:
        user_id = service.create_user(name=name, occupations=occupations)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created user '{name}' (ID: {user_id})")


@user.command("list")
@click.pass_context
def list_users(ctx):
    """List all users."""
    users = UserService(ctx.obj["db"]).list_users()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<5} {'Name':<30} {'Occupations'}")
    click.echo("-" * 70)
    for profile in users:
        occupations = ", ".join(profile.occupations) or "-"
        click.echo(f"{profile.id:<5} {profile.name:<30} {occupations}")


@user.command("occupations")
@click.argument("user_ref", metavar="USER")
@click.option("--set", "new_occupations", help="Replace occupations (comma-separated)")
@click.option("--add", "added", help="Add one occupation")
@click.pass_context
def occupations(ctx, user_ref: str, new_occupations: str | None, added: str | None):
    """Show or change a user's declared occupations."""
    if new_occupations is not None and added is not None:
        click.echo("Error: --set and --add cannot be combined.", err=True)
        ctx.exit(1)

    service = UserService(ctx.obj["db"])
    profile = resolve_user_or_exit(ctx, user_ref)
    current = list(profile.occupations)
    try:
        if new_occupations is not None:
            current = service.set_occupations(profile.id, new_occupations)
        elif added is not None:
            current = service.add_occupation(profile.id, added)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if current:
        click.echo(f"Occupations for '{profile.name}': {', '.join(current)}")
    else:
        click.echo(f"No occupations declared for '{profile.name}'.")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user)
