"""Tests for the income service."""

from datetime import date
from decimal import Decimal

import pytest

from homefin.domain.errors import InvalidAmountError, NotFoundError, ValidationError


def test_create_and_get(income_service):
    income_id = income_service.create_income(
        description="Salary",
        category="Salary",
        amount=Decimal("5000.00"),
        date=date(2024, 3, 5),
        is_recurring=True,
    )

    income = income_service.get_income(income_id)
    assert income.description == "Salary"
    assert income.amount == Decimal("5000.00")
    assert income.date == date(2024, 3, 5)
    assert income.is_recurring is True


def test_create_requires_positive_amount(income_service):
    with pytest.raises(InvalidAmountError):
        income_service.create_income("Refund", "Other", Decimal("-10"), date(2024, 3, 5))


@pytest.mark.parametrize("amount", ["0.004", "100.005", "12.3456"])
def test_create_rejects_amounts_finer_than_cents(income_service, amount):
    with pytest.raises(InvalidAmountError, match="two decimal places"):
        income_service.create_income("Salary", "Salary", Decimal(amount), date(2024, 3, 5))

    assert income_service.list_income() == []


def test_stored_amount_matches_input(income_service, summary_service):
    income_service.create_income("Salary", "Salary", Decimal("100.50"), date(2024, 3, 5))
    income_service.create_income("Gift", "Other", Decimal("0.01"), date(2024, 3, 6))

    assert summary_service.summarize(3, 2024).total_income == Decimal("100.51")


def test_trailing_zeros_are_accepted(income_service):
    income_id = income_service.create_income(
        "Salary", "Salary", Decimal("250.500"), date(2024, 3, 5)
    )

    assert income_service.get_income(income_id).amount == Decimal("250.50")


def test_create_requires_description(income_service):
    with pytest.raises(ValidationError, match="description"):
        income_service.create_income(" ", "Other", Decimal("10"), date(2024, 3, 5))


def test_list_by_month(income_service):
    march = income_service.create_income("Salary", "Salary", Decimal("5000"), date(2024, 3, 5))
    income_service.create_income("Salary", "Salary", Decimal("5000"), date(2024, 4, 5))

    assert [i.id for i in income_service.list_income(month="03", year="2024")] == [march]
    assert len(income_service.list_income()) == 2


def test_list_requires_both_month_and_year(income_service):
    with pytest.raises(ValidationError):
        income_service.list_income(month=3)


def test_update_replaces_fields(income_service):
    income_id = income_service.create_income("Salary", "Salary", Decimal("5000"), date(2024, 3, 5))

    income_service.update_income(
        income_id,
        description="Bonus",
        category="Other",
        amount=Decimal("750"),
        date=date(2024, 3, 20),
    )

    income = income_service.get_income(income_id)
    assert income.description == "Bonus"
    assert income.category == "Other"
    assert income.amount == Decimal("750")
    assert income.date == date(2024, 3, 20)


def test_update_missing_income(income_service):
    with pytest.raises(NotFoundError):
        income_service.update_income(42, "x", "y", Decimal("1"), date(2024, 1, 1))


def test_delete_income(income_service):
    income_id = income_service.create_income("Gift", "Gift", Decimal("100"), date(2024, 3, 5))

    income_service.delete_income(income_id)

    assert income_service.get_income(income_id) is None
    with pytest.raises(NotFoundError):
        income_service.delete_income(income_id)
