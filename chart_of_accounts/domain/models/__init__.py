"""Domain models package."""

from .accounts import Account, AccountDTO, AccountType, Currency
from .chart import AccountsChart
from .gnucash_rows import GnuCashAccountRow

__all__ = [
    "Account",
    "AccountDTO",
    "AccountType",
    "AccountsChart",
    "Currency",
    "GnuCashAccountRow",
]
