"""String to enum resolvers used when reading chart documents."""

from typing import Any

from chart_of_accounts.domain.models.accounts import AccountType, Currency


def resolve_currency(abbrev: str) -> Currency:
    """Map a currency abbreviation to a Currency, UNKNOWN when unsupported."""
    return Currency.from_string(abbrev)


def resolve_account_type(value: str) -> AccountType:
    """Map a case-insensitive type name to an AccountType, OTHER otherwise."""
    return AccountType.from_string(value)


def resolve_account_type_value(value: Any) -> AccountType:
    """Resolve a raw ``type`` value found in a document.

    Args:
        value: Type name or integer code.

    Returns:
        AccountType: Resolved type, OTHER for anything unrecognized.
    """
    if isinstance(value, str):
        return resolve_account_type(value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return AccountType(value)
        except ValueError:
            return AccountType.OTHER
    return AccountType.OTHER


__all__ = [
    "resolve_currency",
    "resolve_account_type",
    "resolve_account_type_value",
]
