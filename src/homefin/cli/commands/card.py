"""Credit card and card transaction commands."""

import click

from homefin.cli.error_handling import handle_domain_error
from homefin.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from homefin.domain.amortization import installment_schedule, per_period_charge
from homefin.domain.card import ALL_BUYERS, CardTransactionService, CreditCardService
from homefin.domain.entities import BuyerType

BUYER_CHOICES = [buyer.value for buyer in BuyerType]
DAY = click.IntRange(1, 31)


@click.group()
def card_group():
    """Manage credit cards."""
    pass


@card_group.command("add")
@click.argument("name", metavar="CARD_NAME")
@click.option("--limit", "credit_limit", required=True, help="Credit limit")
@click.option("--closing-day", required=True, type=DAY, help="Day the statement closes (1-31)")
@click.option("--due-day", required=True, type=DAY, help="Day the bill is due (1-31)")
@click.pass_context
def add_card(ctx, name: str, credit_limit: str, closing_day: int, due_day: int):
    """Add a credit card.

    Examples:
        homefin card add "Visa Gold" --limit 5000 --closing-day 25 --due-day 5
    """
    service = CreditCardService(ctx.obj["db"])
    limit = parse_amount_or_exit(ctx, credit_limit, "limit", positive=False)
    try:
        card_id = service.create_card(
            name=name, credit_limit=limit, closing_day=closing_day, due_day=due_day
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created card '{name}' (ID: {card_id})")


@card_group.command("list")
@click.pass_context
def list_cards(ctx):
    """List all credit cards."""
    service = CreditCardService(ctx.obj["db"])
    cards = service.list_cards()
    if not cards:
        click.echo("No cards found.")
        return

    click.echo("\nCards:")
    click.echo("-" * 70)
    for card in cards:
        click.echo(
            f"ID: {card.id:3d} | {card.name:20s} | Limit: {format_money(card.credit_limit):>12} "
            f"| Closes: {card.closing_day:2d} | Due: {card.due_day:2d}"
        )


@card_group.command("update")
@click.argument("card_id", type=int)
@click.option("--name", help="New card name")
@click.option("--limit", "credit_limit", help="New credit limit")
@click.option("--closing-day", type=DAY, help="New closing day")
@click.option("--due-day", type=DAY, help="New due day")
@click.pass_context
def update_card(
    ctx,
    card_id: int,
    name: str | None,
    credit_limit: str | None,
    closing_day: int | None,
    due_day: int | None,
):
    """Update a credit card. Options that are not given keep their value."""
    service = CreditCardService(ctx.obj["db"])
    current = service.get_card(card_id)
    if current is None:
        click.echo(f"Error: Credit card {card_id} not found", err=True)
        ctx.exit(1)

    limit = (
        parse_amount_or_exit(ctx, credit_limit, "limit", positive=False)
        if credit_limit is not None
        else current.credit_limit
    )
    try:
        service.update_card(
            card_id=card_id,
            name=name if name is not None else current.name,
            credit_limit=limit,
            closing_day=closing_day if closing_day is not None else current.closing_day,
            due_day=due_day if due_day is not None else current.due_day,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated card {card_id}")


@card_group.command("delete")
@click.argument("card_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_card(ctx, card_id: int, yes: bool):
    """Delete a credit card.

    The card can only be deleted if it has no transactions. Use
    'card tx delete' to remove them first.
    """
    service = CreditCardService(ctx.obj["db"])
    card = service.get_card(card_id)
    if card is None:
        click.echo(f"Error: Credit card {card_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete card '{card.name}' (ID: {card_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_card(card_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted card '{card.name}'")


@card_group.group("tx")
def card_tx_group():
    """Manage purchases made on a card."""
    pass


@card_tx_group.command("add")
@click.argument("card_id", type=int)
@click.option("--description", required=True, help="What was bought")
@click.option("--amount", required=True, help="Total purchase amount")
@click.option("--date", "date_str", required=True, help="Purchase date")
@click.option("--installments", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of installments")
@click.option("--installment-current", default=1, show_default=True, type=click.IntRange(min=1),
              help="Installment being recorded")
@click.option("--buyer", type=click.Choice(BUYER_CHOICES), default=BuyerType.USER.value,
              show_default=True, help="Who made the purchase")
@click.option("--third-party-name", help="Who owes this purchase back (required for third_party)")
@click.pass_context
def add_card_transaction(
    ctx,
    card_id: int,
    description: str,
    amount: str,
    date_str: str,
    installments: int,
    installment_current: int,
    buyer: str,
    third_party_name: str | None,
):
    """Record a purchase on a card.

    Examples:
        homefin card tx add 1 --description "TV" --amount 3000 --date 2024-03-15 --installments 10
        homefin card tx add 1 --description "Shoes" --amount 200 --date today --buyer third_party --third-party-name Ana
    """
    service = CardTransactionService(ctx.obj["db"])
    total = parse_amount_or_exit(ctx, amount)
    purchase_date = parse_date_or_exit(ctx, date_str)

    try:
        transaction_id = service.create_transaction(
            card_id=card_id,
            description=description,
            amount=total,
            date=purchase_date,
            installments_total=installments,
            installment_current=installment_current,
            buyer_type=buyer,
            third_party_name=third_party_name,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    transaction = service.get_transaction(transaction_id)
    click.echo(f"Created card transaction {transaction_id}")
    click.echo(f"  Total: {format_money(total)}")
    if installments > 1:
        click.echo(f"  Per installment: {format_money(per_period_charge(transaction))} x{installments}")


@card_tx_group.command("list")
@click.option("--card", "card_id", type=int, help="Only this card")
@click.option("--month", help="Purchase month (1-12); requires --year")
@click.option("--year", help="Purchase year; requires --month")
@click.option("--buyer", type=click.Choice(BUYER_CHOICES + [ALL_BUYERS]), default=ALL_BUYERS,
              show_default=True, help="Filter by buyer")
@click.pass_context
def list_card_transactions(ctx, card_id: int | None, month: str | None, year: str | None, buyer: str):
    """List card purchases."""
    service = CardTransactionService(ctx.obj["db"])
    try:
        transactions = service.list_transactions(
            card_id=card_id, month=month, year=year, buyer_type=buyer
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not transactions:
        click.echo("No card transactions found.")
        return

    click.echo(
        f"{'ID':>4}  {'Card':>4}  {'Date':10}  {'Description':25}  {'Total':>11}  "
        f"{'Installment':>11}  {'Per period':>11}  Buyer"
    )
    click.echo("-" * 100)
    for txn in transactions:
        buyer_label = txn.third_party_name if txn.buyer_type == BuyerType.THIRD_PARTY else "me"
        click.echo(
            f"{txn.id:>4}  {txn.card_id:>4}  {txn.date!s:10}  {txn.description[:25]:25}  "
            f"{format_money(txn.amount):>11}  "
            f"{f'{txn.installment_current}/{txn.installments_total}':>11}  "
            f"{format_money(per_period_charge(txn)):>11}  {buyer_label}"
        )


@card_tx_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_card_transaction(ctx, transaction_id: int):
    """Show a card purchase and its installment schedule."""
    service = CardTransactionService(ctx.obj["db"])
    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Card transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Transaction {txn.id}: {txn.description}")
    click.echo(f"  Card: {txn.card_id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Total: {format_money(txn.amount)}")
    if txn.buyer_type == BuyerType.THIRD_PARTY:
        click.echo(f"  Bought for: {txn.third_party_name}")

    click.echo("  Installments:")
    for number, charge in enumerate(installment_schedule(txn), start=1):
        marker = "  <- current" if number == txn.installment_current else ""
        click.echo(f"    {number:>3}/{txn.installments_total}  {format_money(charge):>11}{marker}")


@card_tx_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--description", help="New description")
@click.option("--amount", help="New total amount")
@click.option("--date", "date_str", help="New purchase date")
@click.option("--installments", type=click.IntRange(min=1), help="New number of installments")
@click.option("--installment-current", type=click.IntRange(min=1), help="New current installment")
@click.option("--buyer", type=click.Choice(BUYER_CHOICES), help="New buyer")
@click.option("--third-party-name", help="New third-party name")
@click.pass_context
def update_card_transaction(
    ctx,
    transaction_id: int,
    description: str | None,
    amount: str | None,
    date_str: str | None,
    installments: int | None,
    installment_current: int | None,
    buyer: str | None,
    third_party_name: str | None,
):
    """Update a card purchase. Options that are not given keep their value."""
    service = CardTransactionService(ctx.obj["db"])
    current = service.get_transaction(transaction_id)
    if current is None:
        click.echo(f"Error: Card transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            description=description if description is not None else current.description,
            amount=parse_amount_or_exit(ctx, amount) if amount is not None else current.amount,
            date=parse_date_or_exit(ctx, date_str) if date_str is not None else current.date,
            installments_total=(
                installments if installments is not None else current.installments_total
            ),
            installment_current=(
                installment_current
                if installment_current is not None
                else current.installment_current
            ),
            buyer_type=buyer if buyer is not None else current.buyer_type,
            third_party_name=(
                third_party_name if third_party_name is not None else current.third_party_name
            ),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated card transaction {transaction_id}")


@card_tx_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_card_transaction(ctx, transaction_id: int):
    """Delete a card purchase."""
    service = CardTransactionService(ctx.obj["db"])
    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted card transaction {transaction_id}")


def register_commands(cli):
    """Register card commands with main CLI."""
    cli.add_command(card_group, name="card")
