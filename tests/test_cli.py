"""Tests for CLI commands."""

import json
from decimal import Decimal

from homefin.cli.main import cli
from homefin.domain.insights import InsightAdvisor


def run(cli_runner, temp_db, *args, **kwargs):
    """Invoke the CLI against the temporary database."""
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


class TestIncomeCommands:
    def test_add_and_list(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "income", "add",
            "--description", "Salary",
            "--category", "Salary",
            "--amount", "5000",
            "--date", "2024-03-05",
        )
        assert result.exit_code == 0
        assert "Created income 1" in result.output

        result = run(cli_runner, temp_db, "income", "list", "--month", "3", "--year", "2024")
        assert result.exit_code == 0
        assert "Salary" in result.output
        assert "$5,000.00" in result.output

    def test_list_empty(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "income", "list")
        assert result.exit_code == 0
        assert "No income found." in result.output

    def test_add_rejects_non_positive_amount(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "income", "add",
            "--description", "Salary",
            "--category", "Salary",
            "--amount", "0",
            "--date", "2024-03-05",
        )
        assert result.exit_code == 1
        assert "Error: Invalid amount" in result.output

    def test_update_keeps_unspecified_fields(self, cli_runner, temp_db, march_2024):
        income_id = march_2024["income_id"]
        result = run(cli_runner, temp_db, "income", "update", str(income_id), "--amount", "5500")
        assert result.exit_code == 0

        income = temp_db.get_income(income_id)
        assert income.amount == Decimal("5500")
        assert income.description == "Salary"

    def test_delete_missing(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "income", "delete", "99")
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestExpenseCommands:
    def test_pay_defaults_to_planned_amount(self, cli_runner, temp_db, march_2024):
        expense_id = march_2024["expense_id"]
        result = run(cli_runner, temp_db, "expense", "pay", str(expense_id))
        assert result.exit_code == 0
        assert "marked paid ($1,200.00)" in result.output

    def test_pay_with_explicit_amount(self, cli_runner, temp_db, march_2024):
        expense_id = march_2024["expense_id"]
        result = run(cli_runner, temp_db, "expense", "pay", str(expense_id), "--amount", "1150")
        assert result.exit_code == 0
        assert temp_db.get_expense(expense_id).amount_actual == Decimal("1150")

    def test_toggle_twice_returns_to_pending(self, cli_runner, temp_db, march_2024):
        expense_id = str(march_2024["expense_id"])
        result = run(cli_runner, temp_db, "expense", "toggle", expense_id)
        assert "is now paid" in result.output

        result = run(cli_runner, temp_db, "expense", "toggle", expense_id)
        assert "is now pending" in result.output
        assert temp_db.get_expense(int(expense_id)).amount_actual == Decimal("0")

    def test_update_does_not_touch_status(self, cli_runner, temp_db, march_2024):
        expense_id = march_2024["expense_id"]
        run(cli_runner, temp_db, "expense", "pay", str(expense_id))

        result = run(cli_runner, temp_db, "expense", "update", str(expense_id), "--notes", "late fee")
        assert result.exit_code == 0

        expense = temp_db.get_expense(expense_id)
        assert expense.status.value == "paid"
        assert expense.notes == "late fee"

    def test_list_by_status(self, cli_runner, temp_db, march_2024):
        result = run(cli_runner, temp_db, "expense", "list", "--status", "paid")
        assert "No expenses found." in result.output

        result = run(cli_runner, temp_db, "expense", "list", "--status", "pending")
        assert "Rent" in result.output


class TestCardCommands:
    def test_add_and_list_cards(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "card", "add", "Visa Gold",
            "--limit", "5000",
            "--closing-day", "25",
            "--due-day", "5",
        )
        assert result.exit_code == 0
        assert "Created card 'Visa Gold' (ID: 1)" in result.output

        result = run(cli_runner, temp_db, "card", "list")
        assert "Visa Gold" in result.output

    def test_add_rejects_day_out_of_range(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "card", "add", "Visa",
            "--limit", "5000",
            "--closing-day", "32",
            "--due-day", "5",
        )
        assert result.exit_code == 2

    def test_delete_blocked_by_transactions(self, cli_runner, temp_db, march_2024):
        card_id = str(march_2024["card_id"])
        result = run(cli_runner, temp_db, "card", "delete", card_id, "--yes")
        assert result.exit_code == 1
        assert "Please delete them first" in result.output
        assert temp_db.get_credit_card(int(card_id)) is not None

    def test_delete_after_transactions_removed(self, cli_runner, temp_db, march_2024):
        run(cli_runner, temp_db, "card", "tx", "delete", str(march_2024["transaction_id"]))

        result = run(cli_runner, temp_db, "card", "delete", str(march_2024["card_id"]), input="y\n")
        assert result.exit_code == 0
        assert "Deleted card 'Test Card'" in result.output

    def test_tx_add_shows_per_installment(self, cli_runner, temp_db, sample_card):
        result = run(
            cli_runner,
            temp_db,
            "card", "tx", "add", str(sample_card.id),
            "--description", "TV",
            "--amount", "3000",
            "--date", "2024-03-15",
            "--installments", "10",
        )
        assert result.exit_code == 0
        assert "Per installment: $300.00 x10" in result.output

    def test_tx_add_unknown_card(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "card", "tx", "add", "42",
            "--description", "TV",
            "--amount", "3000",
            "--date", "2024-03-15",
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_tx_third_party_requires_name(self, cli_runner, temp_db, sample_card):
        result = run(
            cli_runner,
            temp_db,
            "card", "tx", "add", str(sample_card.id),
            "--description", "Shoes",
            "--amount", "200",
            "--date", "2024-03-15",
            "--buyer", "third_party",
        )
        assert result.exit_code == 1

    def test_tx_show_prints_schedule(self, cli_runner, temp_db, march_2024):
        result = run(cli_runner, temp_db, "card", "tx", "show", str(march_2024["transaction_id"]))
        assert result.exit_code == 0
        assert "Headphones" in result.output
        assert "1/3" in result.output
        assert "3/3" in result.output
        assert result.output.count("$100.00") == 3
        assert "<- current" in result.output

    def test_tx_show_missing(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "card", "tx", "show", "99")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_tx_list_filters_by_buyer(self, cli_runner, temp_db, march_2024):
        run(
            cli_runner,
            temp_db,
            "card", "tx", "add", str(march_2024["card_id"]),
            "--description", "Shoes",
            "--amount", "200",
            "--date", "2024-03-20",
            "--buyer", "third_party",
            "--third-party-name", "Ana",
        )

        result = run(cli_runner, temp_db, "card", "tx", "list", "--buyer", "third_party")
        assert "Shoes" in result.output
        assert "Headphones" not in result.output

        result = run(cli_runner, temp_db, "card", "tx", "list")
        assert "Shoes" in result.output
        assert "Headphones" in result.output


class TestDebtCommands:
    def test_add_receive_and_list(self, cli_runner, temp_db):
        result = run(
            cli_runner,
            temp_db,
            "debt", "add", "Ana",
            "--amount", "150",
            "--date", "2024-03-10",
            "--origin", "Concert tickets",
        )
        assert result.exit_code == 0
        assert "Created debt 1: Ana owes $150.00" in result.output

        result = run(cli_runner, temp_db, "debt", "received", "1")
        assert result.exit_code == 0

        result = run(cli_runner, temp_db, "debt", "list", "--status", "pending")
        assert "No debts found." in result.output

        result = run(cli_runner, temp_db, "debt", "list", "--status", "received")
        assert "Ana" in result.output

    def test_toggle_missing(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "debt", "toggle", "7")
        assert result.exit_code == 1


class TestSummaryCommand:
    def test_json_output(self, cli_runner, temp_db, march_2024):
        result = run(cli_runner, temp_db, "summary", "--month", "3", "--year", "2024", "--json")
        assert result.exit_code == 0

        payload = json.loads(result.output)
        assert payload == {
            "totalIncome": 5000.0,
            "totalExpenses": 1300.0,
            "paidExpenses": 0.0,
            "cardTotal": 100.0,
            "balance": 3700.0,
        }

    def test_text_output(self, cli_runner, temp_db, march_2024):
        result = run(cli_runner, temp_db, "summary", "--month", "03", "--year", "2024")
        assert result.exit_code == 0
        assert "Summary for 2024-03" in result.output
        assert "$3,700.00" in result.output

    def test_empty_month_is_zero(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "summary", "--month", "1", "--year", "2030", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output)["balance"] == 0.0

    def test_missing_month_is_usage_error(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "summary", "--year", "2024")
        assert result.exit_code == 2

    def test_invalid_month(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "summary", "--month", "13", "--year", "2024")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_insights_from_injected_advisor(self, cli_runner, temp_db, march_2024):
        advisor = InsightAdvisor(generator=lambda payload: ["Keep it up."])
        result = cli_runner.invoke(
            cli,
            [
                "--db-path", temp_db.database_path,
                "summary", "--month", "3", "--year", "2024", "--json", "--insights",
            ],
            obj={"advisor": advisor},
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["insights"] == ["Keep it up."]

    def test_insights_fallback_without_generator(self, cli_runner, temp_db, march_2024):
        advisor = InsightAdvisor()
        result = cli_runner.invoke(
            cli,
            ["--db-path", temp_db.database_path, "summary", "--month", "3", "--year", "2024", "--insights"],
            obj={"advisor": advisor},
        )
        assert result.exit_code == 0
        assert "Insights:" in result.output
        assert "Consider building an emergency fund." in result.output


def test_categories_lists_both_kinds(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "categories")
    assert result.exit_code == 0
    assert "Income categories:" in result.output
    assert "Expense categories:" in result.output


def test_help_does_not_need_database(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ["--db-path", str(tmp_path / "never.db"), "--help"])
    assert result.exit_code == 0
    assert not (tmp_path / "never.db").exists()
