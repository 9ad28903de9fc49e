"""Application use cases package."""

from .get_account import GetAccountUseCase
from .list_accounts import ListAccountsUseCase
from .load_accounts_chart import LoadAccountsChartUseCase

__all__ = [
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "LoadAccountsChartUseCase",
]
