"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the enums and Decimal handling
the domain relies on never leak into the ORM models and vice versa.
"""

from homefin.domain import entities as domain
from homefin.database.models import (
    Income as ORMIncome,
    Expense as ORMExpense,
    CreditCard as ORMCreditCard,
    CardTransaction as ORMCardTransaction,
    ThirdPartyDebt as ORMThirdPartyDebt,
)


def income_to_domain(orm_income: ORMIncome) -> domain.IncomeEntry:
    """Convert SQLAlchemy Income model to domain IncomeEntry entity."""
    return domain.IncomeEntry(
        id=orm_income.id,
        description=orm_income.description,
        category=orm_income.category,
        amount=orm_income.amount,
        date=orm_income.date,
        is_recurring=bool(orm_income.is_recurring),
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.ExpenseEntry:
    """Convert SQLAlchemy Expense model to domain ExpenseEntry entity."""
    return domain.ExpenseEntry(
        id=orm_expense.id,
        description=orm_expense.description,
        category=orm_expense.category,
        amount_planned=orm_expense.amount_planned,
        amount_actual=orm_expense.amount_actual,
        due_date=orm_expense.due_date,
        status=domain.ExpenseStatus(orm_expense.status or "pending"),
        is_recurring=bool(orm_expense.is_recurring),
        notes=orm_expense.notes,
    )


def credit_card_to_domain(orm_card: ORMCreditCard) -> domain.CreditCard:
    """Convert SQLAlchemy CreditCard model to domain CreditCard entity."""
    return domain.CreditCard(
        id=orm_card.id,
        name=orm_card.name,
        credit_limit=orm_card.credit_limit,
        closing_day=orm_card.closing_day,
        due_day=orm_card.due_day,
    )


def card_transaction_to_domain(orm_txn: ORMCardTransaction) -> domain.CardTransaction:
    """Convert SQLAlchemy CardTransaction model to domain CardTransaction entity."""
    return domain.CardTransaction(
        id=orm_txn.id,
        card_id=orm_txn.card_id,
        description=orm_txn.description,
        amount=orm_txn.amount,
        date=orm_txn.date,
        installments_total=orm_txn.installments_total or 1,
        installment_current=orm_txn.installment_current or 1,
        buyer_type=domain.BuyerType(orm_txn.buyer_type or "user"),
        third_party_name=orm_txn.third_party_name,
    )


def debt_to_domain(orm_debt: ORMThirdPartyDebt) -> domain.ThirdPartyDebt:
    """Convert SQLAlchemy ThirdPartyDebt model to domain ThirdPartyDebt entity."""
    return domain.ThirdPartyDebt(
        id=orm_debt.id,
        person_name=orm_debt.person_name,
        amount=orm_debt.amount,
        date=orm_debt.date,
        origin=orm_debt.origin,
        status=domain.DebtStatus(orm_debt.status or "pending"),
    )
