"""Tests for the third-party debt service."""

from datetime import date
from decimal import Decimal

import pytest

from homefin.domain.entities import DebtStatus, ReplaceDebt, SetDebtStatus
from homefin.domain.errors import InvalidAmountError, NotFoundError, ValidationError


@pytest.fixture
def debt(debt_service):
    debt_id = debt_service.create_debt(
        person_name="Ana", amount=Decimal("150"), date=date(2024, 3, 10), origin="Concert"
    )
    return debt_service.get_debt(debt_id)


def test_new_debt_is_pending(debt):
    assert debt.status == DebtStatus.PENDING
    assert debt.person_name == "Ana"
    assert debt.origin == "Concert"


def test_create_requires_person(debt_service):
    with pytest.raises(ValidationError, match="person_name"):
        debt_service.create_debt("", Decimal("10"), date(2024, 3, 10))


def test_create_rejects_sub_cent_amount(debt_service):
    with pytest.raises(InvalidAmountError):
        debt_service.create_debt("Ana", Decimal("10.005"), date(2024, 3, 10))


def test_status_update_keeps_fields(debt_service, debt):
    debt_service.update_debt(debt.id, SetDebtStatus(status=DebtStatus.RECEIVED))

    updated = debt_service.get_debt(debt.id)
    assert updated.status == DebtStatus.RECEIVED
    assert updated.amount == debt.amount
    assert updated.person_name == debt.person_name
    assert updated.origin == debt.origin


def test_replace_keeps_status(debt_service, debt):
    debt_service.update_debt(debt.id, SetDebtStatus(status=DebtStatus.RECEIVED))
    debt_service.update_debt(
        debt.id,
        ReplaceDebt(person_name="Bo", amount=Decimal("90"), date=date(2024, 3, 12), origin=None),
    )

    updated = debt_service.get_debt(debt.id)
    assert updated.person_name == "Bo"
    assert updated.amount == Decimal("90")
    assert updated.date == date(2024, 3, 12)
    assert updated.origin is None
    assert updated.status == DebtStatus.RECEIVED


def test_toggle(debt_service, debt):
    assert debt_service.toggle_status(debt.id) == DebtStatus.RECEIVED
    assert debt_service.toggle_status(debt.id) == DebtStatus.PENDING


def test_list_by_status(debt_service, debt):
    other = debt_service.create_debt("Bo", Decimal("20"), date(2024, 3, 11))
    debt_service.toggle_status(other)

    assert [d.id for d in debt_service.list_debts(DebtStatus.PENDING)] == [debt.id]
    assert [d.id for d in debt_service.list_debts(DebtStatus.RECEIVED)] == [other]
    assert len(debt_service.list_debts()) == 2


def test_missing_debt(debt_service):
    with pytest.raises(NotFoundError):
        debt_service.update_debt(5, SetDebtStatus(status=DebtStatus.RECEIVED))
    with pytest.raises(NotFoundError):
        debt_service.toggle_status(5)
    with pytest.raises(NotFoundError):
        debt_service.delete_debt(5)


def test_delete_debt(debt_service, debt):
    debt_service.delete_debt(debt.id)

    assert debt_service.get_debt(debt.id) is None
