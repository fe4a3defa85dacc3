"""Chart data commands.

Prints the category breakdown and monthly series as text tables with a
simple bar, so the same numbers that would feed a pie or bar chart can be
read in the terminal.
"""

from decimal import Decimal

import click
from fintrack.cli.caller import resolve_caller_or_exit
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.aggregation import DEFAULT_MONTHS
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService

BAR_WIDTH = 30


def _bar(value: Decimal, maximum: Decimal) -> str:
    if maximum <= 0:
        return ""
    return "#" * int(value / maximum * BAR_WIDTH)


@click.group()
def chart_group():
    """Show chart data for your transactions."""
    pass


@chart_group.command("categories")
@click.pass_context
def category_chart(ctx):
    """Show expenses by category, largest first."""
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    try:
        totals = service.get_category_totals(caller_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not totals:
        click.echo("No expenses found.")
        return

    totals = sorted(totals, key=lambda item: (-item.total, item.category))
    grand_total = sum((item.total for item in totals), Decimal("0"))
    largest = totals[0].total

    click.echo("\nExpenses by Category")
    click.echo("-" * 80)
    for item in totals:
        share = item.total / grand_total * 100
        click.echo(
            f"{item.category[:24]:<24} {item.total:>12,.2f} {share:>5.0f}%  "
            f"{_bar(item.total, largest)}"
        )
    click.echo("-" * 80)
    click.echo(f"{'Total':<24} {grand_total:>12,.2f}")


@chart_group.command("monthly")
@click.option(
    "--months",
    type=click.IntRange(min=1),
    default=DEFAULT_MONTHS,
    show_default=True,
    help="Number of most recent months with data to show",
)
@click.pass_context
def monthly_chart(ctx, months: int):
    """Show income vs expenses for the most recent months."""
    caller_id = resolve_caller_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    try:
        series = service.get_monthly_series(caller_id, months=months)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not series:
        click.echo("No transactions found.")
        return

    largest = max(max(item.income, item.expense) for item in series)

    click.echo(f"\nIncome vs Expenses (Last {months} Months)")
    click.echo("-" * 80)
    click.echo(f"{'Month':<10} {'Income':>12} {'Expense':>12}")
    click.echo("-" * 80)
    for item in series:
        click.echo(f"{item.label:<10} {item.income:>12,.2f} {item.expense:>12,.2f}")
        click.echo(f"{'':<10} income  {_bar(item.income, largest)}")
        click.echo(f"{'':<10} expense {_bar(item.expense, largest)}")


def register_commands(cli: click.Group) -> None:
    """Register chart commands with main CLI."""
    cli.add_command(chart_group, name="chart")
