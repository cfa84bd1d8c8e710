"""Installment amortization for card purchases."""

from decimal import Decimal
from typing import Protocol

from homefin.domain.errors import InvalidAmountError


class Installable(Protocol):
    """Anything carrying a total purchase amount and an installment count."""

    amount: Decimal
    installments_total: int


def per_period_charge(transaction: Installable) -> Decimal:
    """Return the slice of a purchase charged in one period.

    The total amount is spread evenly over ``installments_total`` periods.
    No rounding is applied; callers that display the value quantize it.

    Raises:
        InvalidAmountError: If installments_total is less than 1
    """
    installments = transaction.installments_total
    if installments is None or installments < 1:
        raise InvalidAmountError(
            f"installments_total must be at least 1, got {installments}"
        )
    return Decimal(transaction.amount) / Decimal(installments)


def installment_schedule(transaction: Installable) -> list[Decimal]:
    """Return every per-period charge of a purchase, one per installment."""
    charge = per_period_charge(transaction)
    return [charge] * transaction.installments_total
