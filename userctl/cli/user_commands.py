"""User record CLI commands."""

from dataclasses import dataclass
from pathlib import Path

import typer

from userctl.core.errors import UserError
from userctl.repositories import UserRepository
from userctl.runtime import EnvironmentSettings, configure_logging

from .utils import emit, emit_error, print_failure, print_user, print_user_list

# Let negative numbers such as an age of -1 reach the validators as arguments
ACCEPT_DASHED_ARGS = {"ignore_unknown_options": True}

user_app = typer.Typer(
    help="Manage user records stored in a local JSON file",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


@dataclass
class CliContext:
    """Per-invocation state shared by every command."""

    settings: EnvironmentSettings
    repository: UserRepository

    @property
    def data_file(self) -> Path:
        return self.settings.user_data_file


def get_user_repository() -> UserRepository:
    """Build the repository used by commands."""
    return UserRepository()


@user_app.callback()
def configure(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        "-f",
        help="JSON data file (default: $USER_DATA_FILE, else ./userdata.json)",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (trace, debug, info, warning, error)"
    ),
) -> None:
    """Resolve settings once and prepare the repository for the command."""
    try:
        settings = EnvironmentSettings().with_overrides(
            user_data_file=data_file, log_level=log_level
        )
    except ValueError as e:
        emit_error(f"Error: Invalid configuration: {e}")
        raise typer.Exit(code=1) from e

    configure_logging(settings.log_level)
    ctx.obj = CliContext(settings=settings, repository=get_user_repository())


@user_app.command("create", context_settings=ACCEPT_DASHED_ARGS)
def create_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address, unique key of the user"),
    username: str = typer.Argument(..., help="Username, at least 3 characters"),
    phone: str = typer.Argument(..., help="Phone number, at least 10 digits"),
    age: str = typer.Argument(..., help="Age, 0 to 150"),
) -> None:
    """Create a new user."""
    cli: CliContext = ctx.obj
    try:
        user = cli.repository.create_user(cli.data_file, email, username, phone, age)
    except UserError as e:
        print_failure("create", e)
        raise typer.Exit(code=1) from e

    emit("User created successfully:")
    print_user(user)


@user_app.command("update", context_settings=ACCEPT_DASHED_ARGS)
def update_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address of the user to update"),
    username: str = typer.Argument(..., help="New username, at least 3 characters"),
    phone: str = typer.Argument(..., help="New phone number, at least 10 digits"),
    age: str = typer.Argument(..., help="New age, 0 to 150"),
) -> None:
    """Replace the username, phone and age of an existing user."""
    cli: CliContext = ctx.obj
    try:
        user = cli.repository.update_user(cli.data_file, email, username, phone, age)
    except UserError as e:
        print_failure("update", e)
        raise typer.Exit(code=1) from e

    emit("User updated successfully:")
    print_user(user)


@user_app.command("list")
def list_users(ctx: typer.Context) -> None:
    """List all users."""
    cli: CliContext = ctx.obj
    try:
        users = cli.repository.list_users(cli.data_file)
    except UserError as e:
        print_failure("list", e)
        raise typer.Exit(code=1) from e

    print_user_list(users)


@user_app.command("get")
def get_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address of the user"),
) -> None:
    """Show the details of one user."""
    cli: CliContext = ctx.obj
    try:
        user = cli.repository.get_user(cli.data_file, email)
    except UserError as e:
        print_failure("get", e)
        raise typer.Exit(code=1) from e

    print_user(user)


@user_app.command("delete")
def delete_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address of the user to delete"),
) -> None:
    """Delete a user."""
    cli: CliContext = ctx.obj
    try:
        cli.repository.delete_user(cli.data_file, email)
    except UserError as e:
        print_failure("delete", e)
        raise typer.Exit(code=1) from e

    emit("User deleted successfully")
