"""Income management commands."""

import click

from homefin.cli.error_handling import handle_domain_error
from homefin.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from homefin.domain.income import IncomeService


@click.group()
def income_group():
    """Manage income entries."""
    pass


@income_group.command("add")
@click.option("--description", required=True, help="What the income is")
@click.option("--category", required=True, help="Category (e.g., 'Salary')")
@click.option("--amount", required=True, help="Amount received (e.g., 5000.00)")
@click.option("--date", "date_str", required=True, help="Date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--recurring", is_flag=True, help="Income repeats every month")
@click.pass_context
def add_income(ctx, description: str, category: str, amount: str, date_str: str, recurring: bool):
    """Add an income entry.

    Examples:
        homefin income add --description "Salary" --category Salary --amount 5000 --date 2024-03-05
    """
    service = IncomeService(ctx.obj["db"])
    income_amount = parse_amount_or_exit(ctx, amount)
    income_date = parse_date_or_exit(ctx, date_str)

    try:
        income_id = service.create_income(
            description=description,
            category=category,
            amount=income_amount,
            date=income_date,
            is_recurring=recurring,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created income {income_id}")
    click.echo(f"  Date: {income_date}")
    click.echo(f"  Amount: {format_money(income_amount)}")


@income_group.command("list")
@click.option("--month", help="Month (1-12); requires --year")
@click.option("--year", help="Four-digit year; requires --month")
@click.pass_context
def list_income(ctx, month: str | None, year: str | None):
    """List income entries, optionally for one month."""
    service = IncomeService(ctx.obj["db"])
    try:
        entries = service.list_income(month=month, year=year)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No income found.")
        return

    click.echo(f"{'ID':>4}  {'Date':10}  {'Description':30}  {'Category':15}  {'Amount':>12}")
    click.echo("-" * 79)
    for entry in entries:
        recurring = " (recurring)" if entry.is_recurring else ""
        click.echo(
            f"{entry.id:>4}  {entry.date!s:10}  {entry.description[:30]:30}  "
            f"{entry.category[:15]:15}  {format_money(entry.amount):>12}{recurring}"
        )


@income_group.command("update")
@click.argument("income_id", type=int)
@click.option("--description", help="New description")
@click.option("--category", help="New category")
@click.option("--amount", help="New amount")
@click.option("--date", "date_str", help="New date")
@click.option("--recurring/--no-recurring", default=None, help="Change the recurring flag")
@click.pass_context
def update_income(
    ctx,
    income_id: int,
    description: str | None,
    category: str | None,
    amount: str | None,
    date_str: str | None,
    recurring: bool | None,
):
    """Update an income entry.

    Options that are not given keep their current value.
    """
    service = IncomeService(ctx.obj["db"])
    current = service.get_income(income_id)
    if current is None:
        click.echo(f"Error: Income {income_id} not found", err=True)
        ctx.exit(1)

    try:
        service.update_income(
            income_id=income_id,
            description=description if description is not None else current.description,
            category=category if category is not None else current.category,
            amount=parse_amount_or_exit(ctx, amount) if amount is not None else current.amount,
            date=parse_date_or_exit(ctx, date_str) if date_str is not None else current.date,
            is_recurring=recurring if recurring is not None else current.is_recurring,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated income {income_id}")


@income_group.command("delete")
@click.argument("income_id", type=int)
@click.pass_context
def delete_income(ctx, income_id: int):
    """Delete an income entry."""
    service = IncomeService(ctx.obj["db"])
    try:
        service.delete_income(income_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted income {income_id}")


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
