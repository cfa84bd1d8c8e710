"""Credit card and card transaction domain services."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from homefin.database.base import Database
from homefin.domain.entities import BuyerType, CardTransaction, CreditCard
from homefin.domain.errors import (
    DependencyError,
    InvalidAmountError,
    NotFoundError,
    ReferentialError,
    ValidationError,
    card_delete_blocked,
    card_not_found,
    not_found,
    required_field,
)
from homefin.domain.period import optional_period
from homefin.domain.validation import (
    optional_text,
    require_day_of_month,
    require_non_negative,
    require_positive,
    require_text,
)

logger = logging.getLogger(__name__)

ALL_BUYERS = "all"


class CreditCardService:
    """Service for managing credit cards."""

    def __init__(self, db: Database):
        """Initialize credit card service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_card(
        self, name: str, credit_limit: Decimal, closing_day: int, due_day: int
    ) -> int:
        """Create a credit card.

        Args:
            name: Card name
            credit_limit: Credit limit (zero or more)
            closing_day: Day of month the statement closes (1-31)
            due_day: Day of month the bill is due (1-31)

        Returns:
            Card ID

        Raises:
            ValidationError: If a field is missing or out of range
        """
        name = require_text(name, "name")
        credit_limit = require_non_negative(credit_limit, "credit_limit")
        closing_day = require_day_of_month(closing_day, "closing_day")
        due_day = require_day_of_month(due_day, "due_day")

        card_id = self.db.create_credit_card(
            name=name, credit_limit=credit_limit, closing_day=closing_day, due_day=due_day
        )
        logger.debug("Created credit card %s (%s)", card_id, name)
        return card_id

    def get_card(self, card_id: int) -> Optional[CreditCard]:
        """Get credit card by ID."""
        return self.db.get_credit_card(card_id)

    def list_cards(self) -> list[CreditCard]:
        """List all credit cards."""
        return self.db.list_credit_cards()

    def update_card(
        self, card_id: int, name: str, credit_limit: Decimal, closing_day: int, due_day: int
    ) -> None:
        """Replace all fields of a credit card.

        Raises:
            NotFoundError: If the card does not exist
            ValidationError: If a field is missing or out of range
        """
        if self.db.get_credit_card(card_id) is None:
            raise NotFoundError(not_found("Credit card", card_id))

        self.db.update_credit_card(
            card_id=card_id,
            name=require_text(name, "name"),
            credit_limit=require_non_negative(credit_limit, "credit_limit"),
            closing_day=require_day_of_month(closing_day, "closing_day"),
            due_day=require_day_of_month(due_day, "due_day"),
        )
        logger.debug("Updated credit card %s", card_id)

    def delete_card(self, card_id: int) -> None:
        """Delete a credit card.

        The card can only be deleted once none of its transactions remain.

        Raises:
            NotFoundError: If the card does not exist
            DependencyError: If transactions still reference the card
        """
        if self.db.get_credit_card(card_id) is None:
            raise NotFoundError(not_found("Credit card", card_id))

        transaction_count = self.db.count_card_transactions(card_id)
        if transaction_count > 0:
            raise DependencyError(card_delete_blocked(card_id, transaction_count))

        self.db.delete_credit_card(card_id)
        logger.debug("Deleted credit card %s", card_id)


class CardTransactionService:
    """Service for managing purchases made on credit cards."""

    def __init__(self, db: Database):
        """Initialize card transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(
        self,
        description: str,
        amount: Decimal,
        date: date,
        installments_total: int,
        installment_current: int,
        buyer_type: Union[BuyerType, str],
        third_party_name: Optional[str],
    ) -> dict:
        """Validate transaction fields and return them normalized."""
        description = require_text(description, "description")
        amount = require_positive(amount, "amount")
        if date is None:
            raise ValidationError(required_field("date"))

        if installments_total is None or installments_total < 1:
            raise InvalidAmountError(
                f"installments_total must be at least 1, got {installments_total}"
            )
        if installment_current is None:
            installment_current = 1
        if not 1 <= installment_current <= installments_total:
            raise ValidationError(
                f"installment_current must be between 1 and {installments_total}, "
                f"got {installment_current}"
            )

        try:
            buyer = BuyerType(buyer_type or BuyerType.USER)
        except ValueError:
            raise ValidationError(f"Unknown buyer type '{buyer_type}'")

        if buyer == BuyerType.THIRD_PARTY:
            third_party_name = require_text(third_party_name, "third_party_name")
        else:
            third_party_name = None

        return {
            "description": description,
            "amount": amount,
            "date": date,
            "installments_total": installments_total,
            "installment_current": installment_current,
            "buyer_type": buyer,
            "third_party_name": third_party_name,
        }

    def create_transaction(
        self,
        card_id: int,
        description: str,
        amount: Decimal,
        date: date,
        installments_total: int = 1,
        installment_current: int = 1,
        buyer_type: Union[BuyerType, str] = BuyerType.USER,
        third_party_name: Optional[str] = None,
    ) -> int:
        """Record a card purchase.

        Args:
            card_id: Card the purchase was made on
            description: What was bought
            amount: Total purchase value
            date: Purchase date (anchors the purchase to a month)
            installments_total: Number of installments (at least 1)
            installment_current: Installment being recorded
            buyer_type: Whether the user or a third party made the purchase
            third_party_name: Who owes the purchase back (third-party only)

        Returns:
            Transaction ID

        Raises:
            ReferentialError: If the card does not exist
            ValidationError: If fields are missing or inconsistent
        """
        if self.db.get_credit_card(card_id) is None:
            raise ReferentialError(card_not_found(card_id))

        fields = self._validate(
            description,
            amount,
            date,
            installments_total,
            installment_current,
            buyer_type,
            third_party_name,
        )
        transaction_id = self.db.create_card_transaction(card_id=card_id, **fields)
        logger.debug(
            "Created card transaction %s on card %s (%s x%s)",
            transaction_id,
            card_id,
            fields["amount"],
            fields["installments_total"],
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[CardTransaction]:
        """Get card transaction by ID."""
        return self.db.get_card_transaction(transaction_id)

    def list_transactions(
        self,
        card_id: Optional[int] = None,
        month: Optional[Union[int, str]] = None,
        year: Optional[Union[int, str]] = None,
        buyer_type: Optional[Union[BuyerType, str]] = None,
    ) -> list[CardTransaction]:
        """List card transactions.

        Args:
            card_id: Optional card filter
            month: Optional purchase month (requires year)
            year: Optional purchase year (requires month)
            buyer_type: "user", "third_party", or None/"all" for both

        Raises:
            ValidationError: If the period or buyer type is invalid
        """
        buyer = None
        if buyer_type is not None and buyer_type != ALL_BUYERS:
            try:
                buyer = BuyerType(buyer_type)
            except ValueError:
                raise ValidationError(f"Unknown buyer type '{buyer_type}'")

        start = end = None
        period = optional_period(month, year)
        if period is not None:
            start, end = period.date_range()

        return self.db.list_card_transactions(
            card_id=card_id, start_date=start, end_date=end, buyer_type=buyer
        )

    def update_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        date: date,
        installments_total: int = 1,
        installment_current: int = 1,
        buyer_type: Union[BuyerType, str] = BuyerType.USER,
        third_party_name: Optional[str] = None,
    ) -> None:
        """Replace the fields of a card transaction.

        Raises:
            NotFoundError: If the transaction does not exist
            ValidationError: If fields are missing or inconsistent
        """
        if self.db.get_card_transaction(transaction_id) is None:
            raise NotFoundError(not_found("Card transaction", transaction_id))

        fields = self._validate(
            description,
            amount,
            date,
            installments_total,
            installment_current,
            buyer_type,
            optional_text(third_party_name),
        )
        self.db.update_card_transaction(transaction_id=transaction_id, **fields)
        logger.debug("Updated card transaction %s", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a card transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        self.db.delete_card_transaction(transaction_id)
        logger.debug("Deleted card transaction %s", transaction_id)
