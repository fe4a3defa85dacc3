"""Category suggestion command."""

import click
from fintrack.cli.commands.add import KIND_CHOICES
from fintrack.domain.category import suggested_categories
from fintrack.domain.entities import TransactionKind


@click.command("categories")
@click.option(
    "--type",
    "kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    help="Only show suggestions for this transaction type",
)
def list_categories(kind: str | None):
    """List suggested categories.

    Any category name is accepted when adding a transaction; these are the
    usual ones.
    """
    kinds = [TransactionKind(kind.lower())] if kind else list(TransactionKind)
    for txn_kind in kinds:
        click.echo(f"{txn_kind.value.capitalize()}:")
        for name in suggested_categories(txn_kind):
            click.echo(f"  {name}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(list_categories)
