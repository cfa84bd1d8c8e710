"""Third-party debt domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from homefin.database.base import Database
from homefin.domain.entities import (
    DebtStatus,
    DebtUpdate,
    ReplaceDebt,
    SetDebtStatus,
    ThirdPartyDebt,
)
from homefin.domain.errors import NotFoundError, ValidationError, not_found, required_field
from homefin.domain.validation import optional_text, require_positive, require_text

logger = logging.getLogger(__name__)


class DebtService:
    """Service for tracking money third parties owe the user."""

    def __init__(self, db: Database):
        """Initialize debt service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_debt(
        self, person_name: str, amount: Decimal, date: date, origin: Optional[str] = None
    ) -> int:
        """Record a pending debt.

        Returns:
            Debt ID

        Raises:
            ValidationError: If a field is missing or the amount is not positive
        """
        person_name = require_text(person_name, "person_name")
        amount = require_positive(amount, "amount")
        if date is None:
            raise ValidationError(required_field("date"))

        debt_id = self.db.create_debt(
            person_name=person_name, amount=amount, date=date, origin=optional_text(origin)
        )
        logger.debug("Created debt %s for %s", debt_id, person_name)
        return debt_id

    def get_debt(self, debt_id: int) -> Optional[ThirdPartyDebt]:
        """Get debt by ID."""
        return self.db.get_debt(debt_id)

    def list_debts(self, status: Optional[DebtStatus] = None) -> list[ThirdPartyDebt]:
        """List debts, optionally only pending or received ones."""
        return self.db.list_debts(status=status)

    def update_debt(self, debt_id: int, command: DebtUpdate) -> None:
        """Apply a status change or a full replace to a debt.

        Raises:
            NotFoundError: If the debt does not exist
            ValidationError: If the command carries invalid values
        """
        if self.db.get_debt(debt_id) is None:
            raise NotFoundError(not_found("Debt", debt_id))

        if isinstance(command, SetDebtStatus):
            status = DebtStatus(command.status)
            self.db.update_debt_status(debt_id, status)
            logger.debug("Debt %s marked %s", debt_id, status.value)
        elif isinstance(command, ReplaceDebt):
            if command.date is None:
                raise ValidationError(required_field("date"))
            self.db.update_debt_fields(
                debt_id=debt_id,
                person_name=require_text(command.person_name, "person_name"),
                amount=require_positive(command.amount, "amount"),
                date=command.date,
                origin=optional_text(command.origin),
            )
            logger.debug("Updated debt %s", debt_id)
        else:
            raise ValidationError(f"Unsupported debt update: {type(command).__name__}")

    def toggle_status(self, debt_id: int) -> DebtStatus:
        """Flip a debt between pending and received.

        Returns:
            The new status
        """
        debt = self.db.get_debt(debt_id)
        if debt is None:
            raise NotFoundError(not_found("Debt", debt_id))

        new_status = (
            DebtStatus.PENDING if debt.status == DebtStatus.RECEIVED else DebtStatus.RECEIVED
        )
        self.update_debt(debt_id, SetDebtStatus(status=new_status))
        return new_status

    def delete_debt(self, debt_id: int) -> None:
        """Delete a debt.

        Raises:
            NotFoundError: If the debt does not exist
        """
        self.db.delete_debt(debt_id)
        logger.debug("Deleted debt %s", debt_id)
