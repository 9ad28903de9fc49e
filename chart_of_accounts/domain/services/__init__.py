"""Domain services package."""

from .document_builder import build_chart_document, map_gnucash_account_type
from .document_parser import parse_account, parse_accounts_chart
from .resolvers import (
    resolve_account_type,
    resolve_account_type_value,
    resolve_currency,
)
from .validation import find_duplicate_account_ids, validate_unique_account_ids

__all__ = [
    "build_chart_document",
    "map_gnucash_account_type",
    "parse_account",
    "parse_accounts_chart",
    "resolve_account_type",
    "resolve_account_type_value",
    "resolve_currency",
    "find_duplicate_account_ids",
    "validate_unique_account_ids",
]
