"""Utility functions for homefin."""

from homefin.utils.date_parser import parse_date, month_range
from homefin.utils.amount_parser import parse_amount

__all__ = ["parse_date", "month_range", "parse_amount"]
