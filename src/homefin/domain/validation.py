"""Field validation shared by the entity services."""

from decimal import Decimal
from typing import Optional

from homefin.domain.errors import InvalidAmountError, ValidationError, required_field

# Amount columns are NUMERIC(10, 2)
CENTS = Decimal("0.01")


def require_text(value: Optional[str], field_name: str) -> str:
    """Return the stripped value, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise ValidationError(required_field(field_name))
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Normalize blank strings to None."""
    if value is None or not value.strip():
        return None
    return value.strip()


def require_cents(amount: Decimal, field_name: str) -> Decimal:
    """Return the amount as a Decimal if it has at most two decimal places.

    Anything finer would be silently rounded by the store.
    """
    amount = Decimal(amount)
    if not amount.is_finite() or amount != amount.quantize(CENTS):
        raise InvalidAmountError(
            f"{field_name} must have at most two decimal places, got {amount}"
        )
    return amount


def require_positive(amount: Optional[Decimal], field_name: str) -> Decimal:
    """Return the amount as a Decimal if it is strictly positive."""
    if amount is None:
        raise ValidationError(required_field(field_name))
    amount = require_cents(amount, field_name)
    if amount <= 0:
        raise InvalidAmountError(f"{field_name} must be positive, got {amount}")
    return amount


def require_non_negative(amount: Optional[Decimal], field_name: str) -> Decimal:
    """Return the amount as a Decimal if it is zero or more."""
    if amount is None:
        raise ValidationError(required_field(field_name))
    amount = require_cents(amount, field_name)
    if amount < 0:
        raise InvalidAmountError(f"{field_name} cannot be negative, got {amount}")
    return amount


def require_day_of_month(day: Optional[int], field_name: str) -> int:
    """Return the day if it is between 1 and 31."""
    if day is None:
        raise ValidationError(required_field(field_name))
    if not 1 <= day <= 31:
        raise ValidationError(f"{field_name} must be between 1 and 31, got {day}")
    return day
