"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from homefin.domain.entities import (
    BuyerType,
    CardTransaction,
    CreditCard,
    DebtStatus,
    ExpenseEntry,
    ExpenseStatus,
    IncomeEntry,
    ThirdPartyDebt,
)


class Database(ABC):
    """Abstract database interface for homefin.

    Update and delete operations raise NotFoundError when the target row
    does not exist. Date range filters are inclusive on both ends.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Income operations
    @abstractmethod
    def create_income(
        self,
        description: str,
        category: str,
        amount: Decimal,
        date: date,
        is_recurring: bool = False,
    ) -> int:
        """Create an income entry. Returns income ID."""
        pass

    @abstractmethod
    def get_income(self, income_id: int) -> Optional[IncomeEntry]:
        """Get income entry by ID."""
        pass

    @abstractmethod
    def list_income(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[IncomeEntry]:
        """List income entries, optionally filtered by ``date`` range."""
        pass

    @abstractmethod
    def update_income(
        self,
        income_id: int,
        description: str,
        category: str,
        amount: Decimal,
        date: date,
        is_recurring: bool = False,
    ) -> None:
        """Replace all fields of an income entry."""
        pass

    @abstractmethod
    def delete_income(self, income_id: int) -> None:
        """Delete an income entry."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        description: str,
        category: str,
        amount_planned: Decimal,
        due_date: date,
        is_recurring: bool = False,
        notes: Optional[str] = None,
    ) -> int:
        """Create a pending expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[ExpenseEntry]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[ExpenseStatus] = None,
    ) -> list[ExpenseEntry]:
        """List expenses, optionally filtered by ``due_date`` range and status."""
        pass

    @abstractmethod
    def update_expense_status(
        self, expense_id: int, status: ExpenseStatus, amount_actual: Optional[Decimal]
    ) -> None:
        """Set status and paid amount of an expense, leaving other fields alone."""
        pass

    @abstractmethod
    def update_expense_fields(
        self,
        expense_id: int,
        description: str,
        category: str,
        amount_planned: Decimal,
        due_date: date,
        is_recurring: bool = False,
        notes: Optional[str] = None,
    ) -> None:
        """Replace the non-status fields of an expense."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        pass

    # Credit card operations
    @abstractmethod
    def create_credit_card(
        self, name: str, credit_limit: Decimal, closing_day: int, due_day: int
    ) -> int:
        """Create a credit card. Returns card ID."""
        pass

    @abstractmethod
    def get_credit_card(self, card_id: int) -> Optional[CreditCard]:
        """Get credit card by ID."""
        pass

    @abstractmethod
    def list_credit_cards(self) -> list[CreditCard]:
        """List all credit cards."""
        pass

    @abstractmethod
    def update_credit_card(
        self, card_id: int, name: str, credit_limit: Decimal, closing_day: int, due_day: int
    ) -> None:
        """Replace all fields of a credit card."""
        pass

    @abstractmethod
    def delete_credit_card(self, card_id: int) -> None:
        """Delete a credit card."""
        pass

    # Card transaction operations
    @abstractmethod
    def create_card_transaction(
        self,
        card_id: int,
        description: str,
        amount: Decimal,
        date: date,
        installments_total: int = 1,
        installment_current: int = 1,
        buyer_type: BuyerType = BuyerType.USER,
        third_party_name: Optional[str] = None,
    ) -> int:
        """Create a card transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_card_transaction(self, transaction_id: int) -> Optional[CardTransaction]:
        """Get card transaction by ID."""
        pass

    @abstractmethod
    def list_card_transactions(
        self,
        card_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        buyer_type: Optional[BuyerType] = None,
    ) -> list[CardTransaction]:
        """List card transactions with optional filters.

        Args:
            card_id: Optional card filter (None means all cards)
            start_date: Optional start of purchase ``date`` range
            end_date: Optional end of purchase ``date`` range
            buyer_type: Optional buyer filter
        """
        pass

    @abstractmethod
    def count_card_transactions(self, card_id: int) -> int:
        """Count transactions that reference a card."""
        pass

    @abstractmethod
    def update_card_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        date: date,
        installments_total: int = 1,
        installment_current: int = 1,
        buyer_type: BuyerType = BuyerType.USER,
        third_party_name: Optional[str] = None,
    ) -> None:
        """Replace the fields of a card transaction (card_id stays)."""
        pass

    @abstractmethod
    def delete_card_transaction(self, transaction_id: int) -> None:
        """Delete a card transaction."""
        pass

    # Third-party debt operations
    @abstractmethod
    def create_debt(
        self, person_name: str, amount: Decimal, date: date, origin: Optional[str] = None
    ) -> int:
        """Create a pending third-party debt. Returns debt ID."""
        pass

    @abstractmethod
    def get_debt(self, debt_id: int) -> Optional[ThirdPartyDebt]:
        """Get third-party debt by ID."""
        pass

    @abstractmethod
    def list_debts(self, status: Optional[DebtStatus] = None) -> list[ThirdPartyDebt]:
        """List third-party debts, optionally filtered by status."""
        pass

    @abstractmethod
    def update_debt_status(self, debt_id: int, status: DebtStatus) -> None:
        """Set the status of a debt, leaving other fields alone."""
        pass

    @abstractmethod
    def update_debt_fields(
        self,
        debt_id: int,
        person_name: str,
        amount: Decimal,
        date: date,
        origin: Optional[str] = None,
    ) -> None:
        """Replace the non-status fields of a debt."""
        pass

    @abstractmethod
    def delete_debt(self, debt_id: int) -> None:
        """Delete a third-party debt."""
        pass
