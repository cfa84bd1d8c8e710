"""Expense management commands."""

import click

from homefin.cli.error_handling import handle_domain_error
from homefin.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from homefin.domain.entities import ExpenseStatus, ReplaceExpense, SetExpenseStatus
from homefin.domain.expense import ExpenseService

STATUS_CHOICES = [status.value for status in ExpenseStatus]


@click.group()
def expense_group():
    """Manage planned expenses."""
    pass


@expense_group.command("add")
@click.option("--description", required=True, help="What the expense is")
@click.option("--category", required=True, help="Category (e.g., 'Rent')")
@click.option("--amount", required=True, help="Planned amount")
@click.option("--due-date", required=True, help="Due date (YYYY-MM-DD or relative like 'tomorrow')")
@click.option("--recurring", is_flag=True, help="Expense repeats every month")
@click.option("--notes", help="Notes")
@click.pass_context
def add_expense(
    ctx,
    description: str,
    category: str,
    amount: str,
    due_date: str,
    recurring: bool,
    notes: str | None,
):
    """Add a planned expense. New expenses start as pending.

    Examples:
        homefin expense add --description "Rent" --category Rent --amount 1200 --due-date 2024-03-05
    """
    service = ExpenseService(ctx.obj["db"])
    planned = parse_amount_or_exit(ctx, amount)
    due = parse_date_or_exit(ctx, due_date, "due date")

    try:
        expense_id = service.create_expense(
            description=description,
            category=category,
            amount_planned=planned,
            due_date=due,
            is_recurring=recurring,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Due: {due}")
    click.echo(f"  Planned: {format_money(planned)}")


@expense_group.command("list")
@click.option("--month", help="Month of the due date (1-12); requires --year")
@click.option("--year", help="Year of the due date; requires --month")
@click.option("--status", type=click.Choice(STATUS_CHOICES), help="Only pending or paid expenses")
@click.pass_context
def list_expenses(ctx, month: str | None, year: str | None, status: str | None):
    """List expenses, optionally for one month."""
    service = ExpenseService(ctx.obj["db"])
    try:
        expenses = service.list_expenses(
            month=month,
            year=year,
            status=ExpenseStatus(status) if status else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(
        f"{'ID':>4}  {'Due':10}  {'Description':25}  {'Category':12}  "
        f"{'Planned':>11}  {'Paid':>11}  Status"
    )
    click.echo("-" * 92)
    for expense in expenses:
        click.echo(
            f"{expense.id:>4}  {expense.due_date!s:10}  {expense.description[:25]:25}  "
            f"{expense.category[:12]:12}  {format_money(expense.amount_planned):>11}  "
            f"{format_money(expense.amount_actual):>11}  {expense.status.value}"
        )
        if expense.notes:
            click.echo(f"      Notes: {expense.notes}")


@expense_group.command("update")
@click.argument("expense_id", type=int)
@click.option("--description", help="New description")
@click.option("--category", help="New category")
@click.option("--amount", help="New planned amount")
@click.option("--due-date", help="New due date")
@click.option("--recurring/--no-recurring", default=None, help="Change the recurring flag")
@click.option("--notes", help="New notes (empty string to clear)")
@click.pass_context
def update_expense(
    ctx,
    expense_id: int,
    description: str | None,
    category: str | None,
    amount: str | None,
    due_date: str | None,
    recurring: bool | None,
    notes: str | None,
):
    """Update the details of an expense.

    Status and paid amount are not touched; use 'pay' or 'toggle' for those.
    Options that are not given keep their current value.
    """
    service = ExpenseService(ctx.obj["db"])
    current = service.get_expense(expense_id)
    if current is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    command = ReplaceExpense(
        description=description if description is not None else current.description,
        category=category if category is not None else current.category,
        amount_planned=(
            parse_amount_or_exit(ctx, amount) if amount is not None else current.amount_planned
        ),
        due_date=(
            parse_date_or_exit(ctx, due_date, "due date")
            if due_date is not None
            else current.due_date
        ),
        is_recurring=recurring if recurring is not None else current.is_recurring,
        notes=notes if notes is not None else current.notes,
    )
    try:
        service.update_expense(expense_id, command)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated expense {expense_id}")


@expense_group.command("pay")
@click.argument("expense_id", type=int)
@click.option("--amount", help="Amount actually paid (defaults to the planned amount)")
@click.pass_context
def pay_expense(ctx, expense_id: int, amount: str | None):
    """Mark an expense as paid."""
    service = ExpenseService(ctx.obj["db"])
    paid = parse_amount_or_exit(ctx, amount, positive=False) if amount is not None else None
    try:
        service.update_expense(
            expense_id, SetExpenseStatus(status=ExpenseStatus.PAID, amount_actual=paid)
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    expense = service.get_expense(expense_id)
    click.echo(f"Expense {expense_id} marked paid ({format_money(expense.amount_actual)})")


@expense_group.command("toggle")
@click.argument("expense_id", type=int)
@click.pass_context
def toggle_expense(ctx, expense_id: int):
    """Flip an expense between pending and paid."""
    service = ExpenseService(ctx.obj["db"])
    try:
        new_status = service.toggle_status(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Expense {expense_id} is now {new_status.value}")


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    service = ExpenseService(ctx.obj["db"])
    try:
        service.delete_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
