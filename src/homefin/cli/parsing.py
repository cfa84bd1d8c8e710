"""CLI helpers for turning option strings into domain values."""

from datetime import date
from decimal import Decimal

import click

from homefin.utils.amount_parser import parse_amount, parse_positive_amount
from homefin.utils.date_parser import parse_date


def parse_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> date:
    """Parse a date option, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(
    ctx: click.Context, value: str, label: str = "amount", positive: bool = True
) -> Decimal:
    """Parse an amount option, or exit with a CLI error."""
    try:
        return parse_positive_amount(value) if positive else parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def format_money(amount: Decimal | None) -> str:
    """Format an amount the way every listing shows it."""
    if amount is None:
        return "-"
    return f"${amount:,.2f}"
