"""Domain constants for chart of accounts documents."""

from enum import Enum


ACCOUNTS_FIELD = "accounts"
SUBACCOUNTS_FIELD = "subaccounts"
REQUIRED_ACCOUNT_FIELDS = ("name", "id", "description", "currency")

GNUCASH_ROOT_TYPE = "ROOT"

GNUCASH_ASSET_TYPES = (
    "ASSET",
    "BANK",
    "CASH",
    "STOCK",
    "MUTUAL",
    "RECEIVABLE",
)

GNUCASH_LIABILITY_TYPES = (
    "LIABILITY",
    "CREDIT",
    "PAYABLE",
)


class AccountTypeMode(str, Enum):
    """How the document parser assigns account types."""

    FIXED = "fixed"
    DOCUMENT = "document"


class DuplicateIdPolicy(str, Enum):
    """What loading does when several accounts share an id."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


__all__ = [
    "ACCOUNTS_FIELD",
    "SUBACCOUNTS_FIELD",
    "REQUIRED_ACCOUNT_FIELDS",
    "GNUCASH_ROOT_TYPE",
    "GNUCASH_ASSET_TYPES",
    "GNUCASH_LIABILITY_TYPES",
    "AccountTypeMode",
    "DuplicateIdPolicy",
]
