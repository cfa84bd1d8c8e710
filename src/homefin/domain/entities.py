"""Domain model entities for homefin.

These are pure data classes representing business concepts, independent of
database schema. Services and the summary logic only ever see these types,
never the ORM rows.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class ExpenseStatus(str, Enum):
    """Payment status of a planned expense."""

    PENDING = "pending"
    PAID = "paid"


class DebtStatus(str, Enum):
    """Whether money owed by a third party has been received."""

    PENDING = "pending"
    RECEIVED = "received"


class BuyerType(str, Enum):
    """Who a card purchase was made for."""

    USER = "user"
    THIRD_PARTY = "third_party"


@dataclass(frozen=True)
class IncomeEntry:
    """Income domain entity, anchored by ``date``."""

    id: int
    description: str
    category: str
    amount: Decimal
    date: date
    is_recurring: bool = False


@dataclass(frozen=True)
class ExpenseEntry:
    """Expense domain entity, anchored by ``due_date``."""

    id: int
    description: str
    category: str
    amount_planned: Decimal
    amount_actual: Optional[Decimal]
    due_date: date
    status: ExpenseStatus = ExpenseStatus.PENDING
    is_recurring: bool = False
    notes: Optional[str] = None


@dataclass(frozen=True)
class CreditCard:
    """Credit card domain entity."""

    id: int
    name: str
    credit_limit: Decimal
    closing_day: int
    due_day: int


@dataclass(frozen=True)
class CardTransaction:
    """Card purchase, anchored by its purchase ``date``."""

    id: int
    card_id: int
    description: str
    amount: Decimal
    date: date
    installments_total: int = 1
    installment_current: int = 1
    buyer_type: BuyerType = BuyerType.USER
    third_party_name: Optional[str] = None


@dataclass(frozen=True)
class ThirdPartyDebt:
    """Money a third party owes the user."""

    id: int
    person_name: str
    amount: Decimal
    date: date
    origin: Optional[str] = None
    status: DebtStatus = DebtStatus.PENDING


@dataclass(frozen=True)
class MonthlySummary:
    """Derived monthly aggregate. Computed on demand, never stored."""

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    paid_expenses: Decimal = Decimal("0")
    card_total: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")

    def to_dict(self) -> dict[str, Decimal]:
        """Return the summary keyed the way API consumers expect."""
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "paidExpenses": self.paid_expenses,
            "cardTotal": self.card_total,
            "balance": self.balance,
        }


# Update commands. Callers pick the mode explicitly instead of the service
# guessing it from which fields happen to be present.


@dataclass(frozen=True)
class SetExpenseStatus:
    """Change only the payment status (and paid amount) of an expense.

    ``amount_actual`` defaults to the planned amount when marking paid and
    is always reset to zero when reverting to pending.
    """

    status: ExpenseStatus
    amount_actual: Optional[Decimal] = None


@dataclass(frozen=True)
class ReplaceExpense:
    """Replace every non-status field of an expense."""

    description: str
    category: str
    amount_planned: Decimal
    due_date: date
    is_recurring: bool = False
    notes: Optional[str] = None


ExpenseUpdate = Union[SetExpenseStatus, ReplaceExpense]


@dataclass(frozen=True)
class SetDebtStatus:
    """Change only the status of a third-party debt."""

    status: DebtStatus


@dataclass(frozen=True)
class ReplaceDebt:
    """Replace every non-status field of a third-party debt."""

    person_name: str
    amount: Decimal
    date: date
    origin: Optional[str] = None


DebtUpdate = Union[SetDebtStatus, ReplaceDebt]


@dataclass(frozen=True)
class SuggestedCategories:
    """Category names offered to the user; the category field stays free text."""

    income: tuple[str, ...] = field(
        default=("Salary", "Investments", "Freelance", "Gift", "Other")
    )
    expense: tuple[str, ...] = field(
        default=(
            "Rent",
            "Food",
            "Transport",
            "Leisure",
            "Health",
            "Education",
            "Subscriptions",
            "Other",
        )
    )


SUGGESTED_CATEGORIES = SuggestedCategories()
