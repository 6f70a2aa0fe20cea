"""Utility functions for tradeledger."""

from tradeledger.utils.date_parser import parse_date, parse_range_bound
from tradeledger.utils.item_parser import parse_item

__all__ = ["parse_date", "parse_range_bound", "parse_item"]
