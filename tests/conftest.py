"""Shared pytest fixtures for homefin tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest

from homefin.database.factories import create_sqlite_database
from homefin.domain.card import CardTransactionService, CreditCardService
from homefin.domain.debt import DebtService
from homefin.domain.expense import ExpenseService
from homefin.domain.income import IncomeService
from homefin.domain.summary import MonthlySummaryService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def income_service(temp_db):
    """Create an IncomeService with a temporary database."""
    return IncomeService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def card_service(temp_db):
    """Create a CreditCardService with a temporary database."""
    return CreditCardService(temp_db)


@pytest.fixture
def card_transaction_service(temp_db):
    """Create a CardTransactionService with a temporary database."""
    return CardTransactionService(temp_db)


@pytest.fixture
def debt_service(temp_db):
    """Create a DebtService with a temporary database."""
    return DebtService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a MonthlySummaryService with a temporary database."""
    return MonthlySummaryService(temp_db)


@pytest.fixture
def sample_card(card_service):
    """Create a sample credit card for testing."""
    card_id = card_service.create_card(
        name="Test Card", credit_limit=Decimal("5000.00"), closing_day=25, due_day=5
    )
    return card_service.get_card(card_id)


@pytest.fixture
def march_2024(income_service, expense_service, card_transaction_service, sample_card):
    """Populate March 2024 with one income, one pending expense and one purchase."""
    income_id = income_service.create_income(
        description="Salary",
        category="Salary",
        amount=Decimal("5000"),
        date=date(2024, 3, 10),
    )
    expense_id = expense_service.create_expense(
        description="Rent",
        category="Rent",
        amount_planned=Decimal("1200"),
        due_date=date(2024, 3, 5),
    )
    transaction_id = card_transaction_service.create_transaction(
        card_id=sample_card.id,
        description="Headphones",
        amount=Decimal("300"),
        date=date(2024, 3, 15),
        installments_total=3,
    )
    return {
        "income_id": income_id,
        "expense_id": expense_id,
        "transaction_id": transaction_id,
        "card_id": sample_card.id,
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
