"""Main CLI entry point."""

import logging

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.authentication import StaticAuthenticator
from fintrack.domain.errors import StorageError

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    transaction,
    summary,
    chart,
    categories,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--user",
    help="User identity to act as (overrides FINTRACK_USER environment variable)",
    envvar="FINTRACK_USER",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
    envvar="FINTRACK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, user: str | None, log_level: str):
    """Fintrack - Personal income and expense tracker.

    Record income and expense transactions and view summaries and
    chart data for them.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path)
        except StorageError as e:
            handle_domain_error(ctx, e)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["authenticator"] = StaticAuthenticator(user)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
chart.register_commands(cli)
categories.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
