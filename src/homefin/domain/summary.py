"""Monthly summary domain service."""

import logging
from decimal import Decimal
from typing import Iterable, Optional, Union

from homefin.database.base import Database
from homefin.domain.amortization import per_period_charge
from homefin.domain.entities import (
    BuyerType,
    CardTransaction,
    ExpenseEntry,
    ExpenseStatus,
    IncomeEntry,
    MonthlySummary,
)
from homefin.domain.period import Period, parse_period

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class MonthlySummaryService:
    """Service for computing the derived monthly summary.

    Every figure comes from its own read against the store; the reads are
    not wrapped in a transaction, so a summary computed while another
    process writes may mix before and after states.
    """

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def summarize(
        self,
        month: Optional[Union[int, str]],
        year: Optional[Union[int, str]],
    ) -> MonthlySummary:
        """Compute the summary for one calendar month.

        Income is taken by ``date``, expenses by ``due_date`` and card
        purchases by purchase ``date``. A purchase in installments adds one
        amortized slice to the month it was bought in, and nothing to the
        following months.

        Args:
            month: Month (1-12), int or decimal string
            year: Four-digit year, int or decimal string

        Returns:
            MonthlySummary with every field defaulting to zero

        Raises:
            ValidationError: If month or year is missing or invalid
        """
        period = parse_period(month, year)
        return self.summarize_period(period)

    def summarize_period(self, period: Period) -> MonthlySummary:
        """Compute the summary for an already-validated period."""
        start, end = period.date_range()

        income = self.db.list_income(start_date=start, end_date=end)
        expenses = self.db.list_expenses(start_date=start, end_date=end)
        card_transactions = self.db.list_card_transactions(start_date=start, end_date=end)

        total_income = self.total_income(income)
        planned_expenses = self.planned_expenses(expenses)
        paid_expenses = self.paid_expenses(expenses)
        personal_card = self.card_spend(card_transactions, BuyerType.USER)
        card_total = self.card_spend(card_transactions)

        # Third-party purchases stay in the card bill but not in the household's spend
        total_expenses = planned_expenses + personal_card

        summary = MonthlySummary(
            total_income=total_income,
            total_expenses=total_expenses,
            paid_expenses=paid_expenses,
            card_total=card_total,
            balance=total_income - total_expenses,
        )
        logger.debug("Summary for %s: %s", period, summary)
        return summary

    def total_income(self, income: Iterable[IncomeEntry]) -> Decimal:
        """Sum of income amounts."""
        return sum((entry.amount for entry in income), ZERO)

    def planned_expenses(self, expenses: Iterable[ExpenseEntry]) -> Decimal:
        """Sum of planned amounts, paid or not."""
        return sum((expense.amount_planned for expense in expenses), ZERO)

    def paid_expenses(self, expenses: Iterable[ExpenseEntry]) -> Decimal:
        """Sum of actual amounts of paid expenses."""
        return sum(
            (
                expense.amount_actual or ZERO
                for expense in expenses
                if expense.status == ExpenseStatus.PAID
            ),
            ZERO,
        )

    def card_spend(
        self,
        transactions: Iterable[CardTransaction],
        buyer_type: Optional[BuyerType] = None,
    ) -> Decimal:
        """Sum of per-period charges, optionally for one buyer type only."""
        return sum(
            (
                per_period_charge(txn)
                for txn in transactions
                if buyer_type is None or txn.buyer_type == buyer_type
            ),
            ZERO,
        )
