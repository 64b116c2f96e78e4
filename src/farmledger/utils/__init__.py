"""Utility functions for farmledger."""

from farmledger.utils.date_parser import parse_date, to_local_date, date_key
from farmledger.utils.amount_parser import parse_amount, coerce_number

__all__ = ["parse_date", "to_local_date", "date_key", "parse_amount", "coerce_number"]
