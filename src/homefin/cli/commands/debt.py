"""Third-party debt commands."""

import click

from homefin.cli.error_handling import handle_domain_error
from homefin.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from homefin.domain.debt import DebtService
from homefin.domain.entities import DebtStatus, ReplaceDebt, SetDebtStatus

STATUS_CHOICES = [status.value for status in DebtStatus]


@click.group()
def debt_group():
    """Track money other people owe you."""
    pass


@debt_group.command("add")
@click.argument("person_name", metavar="PERSON")
@click.option("--amount", required=True, help="Amount owed")
@click.option("--date", "date_str", required=True, help="Date the debt was made")
@click.option("--origin", help="What the debt is for")
@click.pass_context
def add_debt(ctx, person_name: str, amount: str, date_str: str, origin: str | None):
    """Record money someone owes you.

    Examples:
        homefin debt add "Ana" --amount 150 --date 2024-03-10 --origin "Concert tickets"
    """
    service = DebtService(ctx.obj["db"])
    owed = parse_amount_or_exit(ctx, amount)
    debt_date = parse_date_or_exit(ctx, date_str)
    try:
        debt_id = service.create_debt(
            person_name=person_name, amount=owed, date=debt_date, origin=origin
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created debt {debt_id}: {person_name} owes {format_money(owed)}")


@debt_group.command("list")
@click.option("--status", type=click.Choice(STATUS_CHOICES), help="Only pending or received debts")
@click.pass_context
def list_debts(ctx, status: str | None):
    """List debts."""
    service = DebtService(ctx.obj["db"])
    debts = service.list_debts(status=DebtStatus(status) if status else None)
    if not debts:
        click.echo("No debts found.")
        return

    click.echo(f"{'ID':>4}  {'Date':10}  {'Person':20}  {'Amount':>11}  {'Status':9}  Origin")
    click.echo("-" * 80)
    for debt in debts:
        click.echo(
            f"{debt.id:>4}  {debt.date!s:10}  {debt.person_name[:20]:20}  "
            f"{format_money(debt.amount):>11}  {debt.status.value:9}  {debt.origin or ''}"
        )


@debt_group.command("update")
@click.argument("debt_id", type=int)
@click.option("--person", "person_name", help="New person name")
@click.option("--amount", help="New amount")
@click.option("--date", "date_str", help="New date")
@click.option("--origin", help="New origin (empty string to clear)")
@click.pass_context
def update_debt(
    ctx,
    debt_id: int,
    person_name: str | None,
    amount: str | None,
    date_str: str | None,
    origin: str | None,
):
    """Update the details of a debt. Status is changed with 'received' or 'toggle'."""
    service = DebtService(ctx.obj["db"])
    current = service.get_debt(debt_id)
    if current is None:
        click.echo(f"Error: Debt {debt_id} not found", err=True)
        ctx.exit(1)

    command = ReplaceDebt(
        person_name=person_name if person_name is not None else current.person_name,
        amount=parse_amount_or_exit(ctx, amount) if amount is not None else current.amount,
        date=parse_date_or_exit(ctx, date_str) if date_str is not None else current.date,
        origin=origin if origin is not None else current.origin,
    )
    try:
        service.update_debt(debt_id, command)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated debt {debt_id}")


@debt_group.command("received")
@click.argument("debt_id", type=int)
@click.pass_context
def mark_received(ctx, debt_id: int):
    """Mark a debt as received."""
    service = DebtService(ctx.obj["db"])
    try:
        service.update_debt(debt_id, SetDebtStatus(status=DebtStatus.RECEIVED))
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Debt {debt_id} marked received")


@debt_group.command("toggle")
@click.argument("debt_id", type=int)
@click.pass_context
def toggle_debt(ctx, debt_id: int):
    """Flip a debt between pending and received."""
    service = DebtService(ctx.obj["db"])
    try:
        new_status = service.toggle_status(debt_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Debt {debt_id} is now {new_status.value}")


@debt_group.command("delete")
@click.argument("debt_id", type=int)
@click.pass_context
def delete_debt(ctx, debt_id: int):
    """Delete a debt."""
    service = DebtService(ctx.obj["db"])
    try:
        service.delete_debt(debt_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted debt {debt_id}")


def register_commands(cli):
    """Register debt commands with main CLI."""
    cli.add_command(debt_group, name="debt")
