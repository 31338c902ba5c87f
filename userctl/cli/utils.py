"""Shared output helpers for CLI commands."""

from collections.abc import Iterable

import typer
from rich.console import Console

from userctl.core.errors import UserError
from userctl.entities.user import User

# Error text echoes user input: no markup, emoji codes, highlighting or wrapping
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

LIST_RULE = "-" * 24


def emit(message: str) -> None:
    """Print one line to stdout exactly as given, tabs included."""
    typer.echo(message)


def emit_error(message: str) -> None:
    """Print one plain line to stderr."""
    err_console.print(message, markup=False)


def print_user(user: User) -> None:
    """Print the four-line detail block of a user."""
    emit(f"Email: {user.email}")
    emit(f"Username: {user.username}")
    emit(f"Phone: {user.phone}")
    emit(f"Age: {user.age}")


def print_user_list(users: Iterable[User]) -> None:
    """Print the email/username table."""
    emit("User list:")
    emit("Email\t\tUsername")
    emit(LIST_RULE)
    for user in users:
        emit(f"{user.email}\t{user.username}")


def format_failure(verb: str, error: UserError) -> str:
    """Render ``error`` as ``Error: Failed to <verb> user: Kind("reason")``."""
    return f"Error: Failed to {verb} user: {error!r}"


def print_failure(verb: str, error: UserError) -> None:
    emit_error(format_failure(verb, error))
