"""Tests for installment amortization."""

from datetime import date
from decimal import Decimal

import pytest

from homefin.domain.amortization import installment_schedule, per_period_charge
from homefin.domain.entities import BuyerType, CardTransaction
from homefin.domain.errors import InvalidAmountError, ValidationError


def _txn(amount: str, installments: int) -> CardTransaction:
    return CardTransaction(
        id=1,
        card_id=1,
        description="Purchase",
        amount=Decimal(amount),
        date=date(2024, 1, 10),
        installments_total=installments,
        buyer_type=BuyerType.USER,
    )


def test_single_installment_charges_full_amount():
    assert per_period_charge(_txn("250.00", 1)) == Decimal("250.00")


def test_even_split():
    assert per_period_charge(_txn("300", 3)) == Decimal("100")


def test_uneven_split_is_not_rounded():
    charge = per_period_charge(_txn("100", 3))
    assert charge != Decimal("33.33")
    assert charge.quantize(Decimal("0.01")) == Decimal("33.33")


@pytest.mark.parametrize("amount,installments", [("100", 3), ("999.99", 7), ("0.10", 12)])
def test_schedule_preserves_amount(amount, installments):
    """Summing every installment gives back the purchase amount."""
    schedule = installment_schedule(_txn(amount, installments))

    assert len(schedule) == installments
    assert abs(sum(schedule) - Decimal(amount)) < Decimal("0.000001")


def test_zero_installments_rejected():
    with pytest.raises(InvalidAmountError):
        per_period_charge(_txn("100", 0))


def test_invalid_amount_is_validation_error():
    with pytest.raises(ValidationError):
        per_period_charge(_txn("100", -2))


def test_accepts_any_object_with_amount_and_installments():
    class Purchase:
        amount = Decimal("90")
        installments_total = 2

    assert per_period_charge(Purchase()) == Decimal("45")
