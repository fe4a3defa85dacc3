"""Add transaction command."""

import click
from fintrack.cli.caller import resolve_caller_or_exit
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import TransactionKind
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.date_parser import parse_date

KIND_CHOICES = [kind.value for kind in TransactionKind]


@click.command("add")
@click.option(
    "--type",
    "kind",
    required=True,
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45 or 1,234.50)")
@click.option("--category", required=True, help="Category (e.g., 'Food & Dining')")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    amount: str,
    category: str,
    date: str,
    description: str | None,
):
    """Add an income or expense transaction.

    Examples:
        fintrack add --type income --amount 1000 --category Salary --date 2024-01-05
        fintrack add --type expense --amount 200 --category "Food & Dining" --description Groceries
    """
    caller_id = resolve_caller_or_exit(ctx)
    transaction_service = TransactionService(ctx.obj["db"])

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = transaction_service.create_transaction(
            caller_id,
            kind=kind,
            amount=amount,
            category=category,
            occurred_at=txn_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Type: {txn.kind.value}")
    click.echo(f"  Date: {txn.occurred_at}")
    click.echo(f"  Amount: {txn.amount:,.2f}")
    click.echo(f"  Category: {txn.category}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
