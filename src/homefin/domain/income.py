"""Income domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from homefin.database.base import Database
from homefin.domain.entities import IncomeEntry
from homefin.domain.errors import NotFoundError, ValidationError, not_found, required_field
from homefin.domain.period import optional_period
from homefin.domain.validation import require_positive, require_text

logger = logging.getLogger(__name__)


class IncomeService:
    """Service for managing income entries."""

    def __init__(self, db: Database):
        """Initialize income service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_income(
        self,
        description: str,
        category: str,
        amount: Decimal,
        date: date,
        is_recurring: bool = False,
    ) -> int:
        """Create an income entry.

        Args:
            description: What the income is
            category: Free-text category (see SUGGESTED_CATEGORIES)
            amount: Positive amount
            date: Date the income is received
            is_recurring: Whether it repeats every month

        Returns:
            Income ID

        Raises:
            ValidationError: If a field is missing or amount is not positive
        """
        description = require_text(description, "description")
        category = require_text(category, "category")
        amount = require_positive(amount, "amount")
        if date is None:
            raise ValidationError(required_field("date"))

        income_id = self.db.create_income(
            description=description,
            category=category,
            amount=amount,
            date=date,
            is_recurring=is_recurring,
        )
        logger.debug("Created income %s (%s on %s)", income_id, amount, date)
        return income_id

    def get_income(self, income_id: int) -> Optional[IncomeEntry]:
        """Get income entry by ID."""
        return self.db.get_income(income_id)

    def list_income(
        self,
        month: Optional[Union[int, str]] = None,
        year: Optional[Union[int, str]] = None,
    ) -> list[IncomeEntry]:
        """List income entries, optionally for a single month.

        Raises:
            ValidationError: If only one of month/year is given
        """
        period = optional_period(month, year)
        if period is None:
            return self.db.list_income()
        start, end = period.date_range()
        return self.db.list_income(start_date=start, end_date=end)

    def update_income(
        self,
        income_id: int,
        description: str,
        category: str,
        amount: Decimal,
        date: date,
        is_recurring: bool = False,
    ) -> None:
        """Replace all fields of an income entry.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If a field is missing or amount is not positive
        """
        if self.db.get_income(income_id) is None:
            raise NotFoundError(not_found("Income", income_id))

        description = require_text(description, "description")
        category = require_text(category, "category")
        amount = require_positive(amount, "amount")
        if date is None:
            raise ValidationError(required_field("date"))

        self.db.update_income(
            income_id=income_id,
            description=description,
            category=category,
            amount=amount,
            date=date,
            is_recurring=is_recurring,
        )
        logger.debug("Updated income %s", income_id)

    def delete_income(self, income_id: int) -> None:
        """Delete an income entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.db.delete_income(income_id)
        logger.debug("Deleted income %s", income_id)
