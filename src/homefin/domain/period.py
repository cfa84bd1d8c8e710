"""Calendar month periods used for filtering and aggregation."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from homefin.domain.errors import ValidationError
from homefin.utils.date_parser import month_range


@dataclass(frozen=True)
class Period:
    """A calendar month/year pair."""

    month: int
    year: int

    @property
    def month_key(self) -> str:
        """Two-digit month, e.g. ``"03"``."""
        return f"{self.month:02d}"

    def date_range(self) -> tuple[date, date]:
        """Return the inclusive ``(first_day, last_day)`` of the month."""
        return month_range(self.month, self.year)

    def __str__(self) -> str:
        return f"{self.year}-{self.month_key}"


def _to_int(value: Union[int, str], name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text.isdecimal():
        raise ValidationError(f"{name} must be a number, got '{value}'")
    return int(text)


def parse_period(
    month: Optional[Union[int, str]], year: Optional[Union[int, str]]
) -> Period:
    """Build a Period from caller-supplied month and year.

    Both values may be ints or decimal strings ("3" and "03" are the same
    month). Neither may be omitted: there is no implicit "current month".

    Raises:
        ValidationError: If month or year is missing or out of range
    """
    if month is None or (isinstance(month, str) and not month.strip()):
        raise ValidationError("month and year are required")
    if year is None or (isinstance(year, str) and not year.strip()):
        raise ValidationError("month and year are required")

    month_number = _to_int(month, "month")
    year_number = _to_int(year, "year")

    if not 1 <= month_number <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month_number}")
    if not 1000 <= year_number <= 9999:
        raise ValidationError(f"year must have four digits, got {year_number}")

    return Period(month=month_number, year=year_number)


def optional_period(
    month: Optional[Union[int, str]], year: Optional[Union[int, str]]
) -> Optional[Period]:
    """Return a Period when both parts are given, None when neither is.

    List operations accept an optional month filter, but a half-specified
    one is still a caller error.
    """
    if month is None and year is None:
        return None
    return parse_period(month, year)
