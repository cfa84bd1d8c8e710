"""Expense domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from homefin.database.base import Database
from homefin.domain.entities import (
    ExpenseEntry,
    ExpenseStatus,
    ExpenseUpdate,
    ReplaceExpense,
    SetExpenseStatus,
)
from homefin.domain.errors import NotFoundError, ValidationError, not_found, required_field
from homefin.domain.period import optional_period
from homefin.domain.validation import (
    optional_text,
    require_non_negative,
    require_positive,
    require_text,
)

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for managing planned expenses and their payment status."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_expense(
        self,
        description: str,
        category: str,
        amount_planned: Decimal,
        due_date: date,
        is_recurring: bool = False,
        notes: Optional[str] = None,
    ) -> int:
        """Create a pending expense.

        Args:
            description: What the expense is
            category: Free-text category
            amount_planned: Positive planned amount
            due_date: Date the expense falls due (anchors it to a month)
            is_recurring: Whether it repeats every month
            notes: Optional notes

        Returns:
            Expense ID

        Raises:
            ValidationError: If a field is missing or the amount is not positive
        """
        description = require_text(description, "description")
        category = require_text(category, "category")
        amount_planned = require_positive(amount_planned, "amount_planned")
        if due_date is None:
            raise ValidationError(required_field("due_date"))

        expense_id = self.db.create_expense(
            description=description,
            category=category,
            amount_planned=amount_planned,
            due_date=due_date,
            is_recurring=is_recurring,
            notes=optional_text(notes),
        )
        logger.debug("Created expense %s due %s", expense_id, due_date)
        return expense_id

    def get_expense(self, expense_id: int) -> Optional[ExpenseEntry]:
        """Get expense by ID."""
        return self.db.get_expense(expense_id)

    def list_expenses(
        self,
        month: Optional[Union[int, str]] = None,
        year: Optional[Union[int, str]] = None,
        status: Optional[ExpenseStatus] = None,
    ) -> list[ExpenseEntry]:
        """List expenses, optionally for the month their due date falls in."""
        period = optional_period(month, year)
        if period is None:
            return self.db.list_expenses(status=status)
        start, end = period.date_range()
        return self.db.list_expenses(start_date=start, end_date=end, status=status)

    def update_expense(self, expense_id: int, command: ExpenseUpdate) -> None:
        """Apply a status change or a full replace to an expense.

        A ``SetExpenseStatus`` command only touches status and paid amount;
        a ``ReplaceExpense`` command only touches the other fields.

        Raises:
            NotFoundError: If the expense does not exist
            ValidationError: If the command carries invalid values
        """
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(not_found("Expense", expense_id))

        if isinstance(command, SetExpenseStatus):
            self._set_status(expense, command)
        elif isinstance(command, ReplaceExpense):
            self._replace(expense, command)
        else:
            raise ValidationError(f"Unsupported expense update: {type(command).__name__}")

    def _set_status(self, expense: ExpenseEntry, command: SetExpenseStatus) -> None:
        status = ExpenseStatus(command.status)
        if status == ExpenseStatus.PAID:
            if command.amount_actual is None:
                amount_actual = expense.amount_planned
            else:
                amount_actual = require_non_negative(command.amount_actual, "amount_actual")
        else:
            # Reverting to pending always clears the paid amount
            amount_actual = Decimal("0")

        self.db.update_expense_status(expense.id, status, amount_actual)
        logger.debug("Expense %s marked %s (%s)", expense.id, status.value, amount_actual)

    def _replace(self, expense: ExpenseEntry, command: ReplaceExpense) -> None:
        description = require_text(command.description, "description")
        category = require_text(command.category, "category")
        amount_planned = require_positive(command.amount_planned, "amount_planned")
        if command.due_date is None:
            raise ValidationError(required_field("due_date"))

        self.db.update_expense_fields(
            expense_id=expense.id,
            description=description,
            category=category,
            amount_planned=amount_planned,
            due_date=command.due_date,
            is_recurring=command.is_recurring,
            notes=optional_text(command.notes),
        )
        logger.debug("Updated expense %s", expense.id)

    def toggle_status(self, expense_id: int) -> ExpenseStatus:
        """Flip an expense between pending and paid.

        Returns:
            The new status
        """
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(not_found("Expense", expense_id))

        new_status = (
            ExpenseStatus.PENDING if expense.status == ExpenseStatus.PAID else ExpenseStatus.PAID
        )
        self._set_status(expense, SetExpenseStatus(status=new_status))
        return new_status

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense does not exist
        """
        self.db.delete_expense(expense_id)
        logger.debug("Deleted expense %s", expense_id)
