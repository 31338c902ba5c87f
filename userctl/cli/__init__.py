"""Main CLI application module."""

from .user_commands import user_app

# The user commands are the whole command surface
app = user_app


def main() -> None:
    """Main entry point for the CLI."""
    app(prog_name="userctl")


if __name__ == "__main__":
    main()
