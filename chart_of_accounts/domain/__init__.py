"""Domain package for the chart of accounts tree and its rules."""

from .constants import AccountTypeMode, DuplicateIdPolicy
from .exceptions import (
    ChartDocumentError,
    DuplicateAccountIdError,
    MissingAccountFieldError,
)
from .models import (
    Account,
    AccountDTO,
    AccountType,
    AccountsChart,
    Currency,
    GnuCashAccountRow,
)
from .policies import is_chart_account_name
from .services import (
    build_chart_document,
    find_duplicate_account_ids,
    parse_account,
    parse_accounts_chart,
    resolve_account_type,
    resolve_currency,
    validate_unique_account_ids,
)

__all__ = [
    "Account",
    "AccountDTO",
    "AccountType",
    "AccountsChart",
    "Currency",
    "GnuCashAccountRow",
    "AccountTypeMode",
    "DuplicateIdPolicy",
    "ChartDocumentError",
    "DuplicateAccountIdError",
    "MissingAccountFieldError",
    "is_chart_account_name",
    "build_chart_document",
    "find_duplicate_account_ids",
    "parse_account",
    "parse_accounts_chart",
    "resolve_account_type",
    "resolve_currency",
    "validate_unique_account_ids",
]
