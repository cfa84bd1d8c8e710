"""Tests for Database interface returning domain models."""

from datetime import date
from decimal import Decimal

import pytest

from homefin.database.factories import create_sqlite_database
from homefin.domain import entities
from homefin.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_income_round_trip(self, temp_db):
        income_id = temp_db.create_income(
            description="Salary", category="Salary", amount=Decimal("10.50"), date=date(2024, 3, 1)
        )

        income = temp_db.get_income(income_id)

        assert isinstance(income, entities.IncomeEntry)
        assert isinstance(income.amount, Decimal)
        assert income.amount == Decimal("10.50")
        assert income.is_recurring is False

    def test_missing_rows_return_none(self, temp_db):
        assert temp_db.get_income(1) is None
        assert temp_db.get_expense(1) is None
        assert temp_db.get_credit_card(1) is None
        assert temp_db.get_card_transaction(1) is None
        assert temp_db.get_debt(1) is None

    def test_list_income_range_is_inclusive(self, temp_db):
        for day in (1, 15, 31):
            temp_db.create_income("x", "Other", Decimal("1"), date(2024, 3, day))
        temp_db.create_income("x", "Other", Decimal("1"), date(2024, 4, 1))

        rows = temp_db.list_income(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))

        assert sorted(r.date.day for r in rows) == [1, 15, 31]

    def test_list_expenses_filters_on_due_date(self, temp_db):
        temp_db.create_expense("a", "Rent", Decimal("1"), date(2024, 3, 31))
        temp_db.create_expense("b", "Rent", Decimal("1"), date(2024, 4, 1))

        rows = temp_db.list_expenses(start_date=date(2024, 4, 1), end_date=date(2024, 4, 30))

        assert [r.description for r in rows] == ["b"]
        assert rows[0].status == entities.ExpenseStatus.PENDING

    def test_expense_status_update_only_touches_status(self, temp_db):
        expense_id = temp_db.create_expense("Rent", "Rent", Decimal("100"), date(2024, 3, 5))

        temp_db.update_expense_status(expense_id, entities.ExpenseStatus.PAID, Decimal("100"))

        expense = temp_db.get_expense(expense_id)
        assert expense.status == entities.ExpenseStatus.PAID
        assert expense.amount_actual == Decimal("100")
        assert expense.description == "Rent"

    def test_card_transactions_filtered_by_buyer(self, temp_db):
        card_id = temp_db.create_credit_card("Visa", Decimal("100"), 1, 10)
        temp_db.create_card_transaction(card_id, "mine", Decimal("5"), date(2024, 3, 1))
        temp_db.create_card_transaction(
            card_id,
            "theirs",
            Decimal("5"),
            date(2024, 3, 1),
            buyer_type=entities.BuyerType.THIRD_PARTY,
            third_party_name="Ana",
        )

        rows = temp_db.list_card_transactions(buyer_type=entities.BuyerType.THIRD_PARTY)

        assert [r.description for r in rows] == ["theirs"]
        assert rows[0].buyer_type == entities.BuyerType.THIRD_PARTY
        assert temp_db.count_card_transactions(card_id) == 2

    def test_debt_status_filter(self, temp_db):
        debt_id = temp_db.create_debt("Ana", Decimal("10"), date(2024, 3, 1))
        temp_db.create_debt("Bo", Decimal("10"), date(2024, 3, 2))
        temp_db.update_debt_status(debt_id, entities.DebtStatus.RECEIVED)

        received = temp_db.list_debts(status=entities.DebtStatus.RECEIVED)

        assert [d.person_name for d in received] == ["Ana"]

    @pytest.mark.parametrize(
        "method,args",
        [
            ("delete_income", (1,)),
            ("delete_expense", (1,)),
            ("delete_credit_card", (1,)),
            ("delete_card_transaction", (1,)),
            ("delete_debt", (1,)),
            ("update_debt_status", (1, entities.DebtStatus.RECEIVED)),
            ("update_expense_status", (1, entities.ExpenseStatus.PAID, None)),
        ],
    )
    def test_writes_to_missing_rows_raise_not_found(self, temp_db, method, args):
        with pytest.raises(NotFoundError):
            getattr(temp_db, method)(*args)

    def test_data_persists_across_instances(self, temp_db):
        temp_db.create_debt("Ana", Decimal("10"), date(2024, 3, 1))

        other = create_sqlite_database(database_path=temp_db.database_path)
        try:
            assert [d.person_name for d in other.list_debts()] == ["Ana"]
        finally:
            other.disconnect()

    def test_env_var_sets_database_path(self, tmp_path, monkeypatch):
        db_path = tmp_path / "env.db"
        monkeypatch.setenv("HOMEFIN_DB_PATH", str(db_path))

        db = create_sqlite_database()

        assert db.database_url == f"sqlite:///{db_path}"

    def test_missing_parent_directories_are_created(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "homefin.db"

        db = create_sqlite_database(database_path=str(db_path))
        try:
            db.create_debt("Ana", Decimal("10"), date(2024, 3, 1))
        finally:
            db.disconnect()

        assert db_path.exists()
