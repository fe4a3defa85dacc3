"""Summary command."""

import click
from fintrack.cli.caller import resolve_caller_or_exit
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show total income, total expenses and balance."""
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    try:
        totals = service.get_summary(caller_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{'Total Income:':<16}{totals.total_income:>14,.2f}")
    click.echo(f"{'Total Expense:':<16}{totals.total_expense:>14,.2f}")
    click.echo("-" * 30)
    click.echo(f"{'Balance:':<16}{totals.balance:>14,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
