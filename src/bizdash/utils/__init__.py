"""Utility functions for bizdash."""

from bizdash.utils.date_parser import parse_date, to_local_date, start_of_day
from bizdash.utils.amount_parser import parse_amount, parse_count

__all__ = ["parse_date", "to_local_date", "start_of_day", "parse_amount", "parse_count"]
