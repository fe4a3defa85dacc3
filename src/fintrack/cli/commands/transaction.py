"""Transaction management commands."""

import click
from fintrack.cli.caller import resolve_caller_or_exit
from fintrack.cli.commands.add import KIND_CHOICES
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import TransactionKind, TransactionUpdate
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including creation time")
@click.pass_context
def list_transactions(ctx, verbose: bool):
    """List your transactions, newest first."""
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    try:
        transactions = service.list_transactions(caller_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")

    if verbose:
        click.echo("=" * 80)
        for txn in transactions:
            click.echo(f"\nTransaction ID: {txn.id}")
            click.echo(f"  Type: {txn.kind.value}")
            click.echo(f"  Date: {txn.occurred_at}")
            click.echo(f"  Amount: {txn.amount:,.2f}")
            click.echo(f"  Category: {txn.category}")
            if txn.description:
                click.echo(f"  Description: {txn.description}")
            click.echo(f"  Created: {txn.created_at}")
            click.echo("-" * 80)
        return

    click.echo("-" * 94)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>12}  {'Category':<24} {'Description':<30}"
    )
    click.echo("-" * 94)
    for txn in transactions:
        sign = "+" if txn.kind == TransactionKind.INCOME else "-"
        amount_str = f"{sign}{txn.amount:,.2f}"
        click.echo(
            f"{txn.id:<6} {str(txn.occurred_at):<12} {txn.kind.value:<8} {amount_str:>12}  "
            f"{txn.category[:24]:<24} {txn.description[:30]:<30}"
        )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--type", "kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Transaction type")
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option("--category", help="Category")
@click.option("--description", help="Description (use \"\" to clear)")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    kind: str | None,
    amount: str | None,
    category: str | None,
    description: str | None,
    date: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use --description "" to clear
    the description.

    Examples:
        fintrack transaction update 1 --amount 75.00
        fintrack transaction update 1 --type expense --category "Shopping"
    """
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    update = TransactionUpdate(
        kind=kind,
        amount=amount,
        category=category,
        description=description,
        occurred_at=txn_date,
    )
    if update.is_empty():
        click.echo("Nothing to update.")
        return

    try:
        service.update_transaction(caller_id, transaction_id, update)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction permanently.

    Examples:
        fintrack transaction delete 1
    """
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    # Existence and ownership are checked before asking
    try:
        service.get_transaction(caller_id, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(caller_id, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
