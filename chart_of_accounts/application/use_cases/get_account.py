"""Use case to look up a single account by id."""

from chart_of_accounts.domain.models.accounts import Account
from chart_of_accounts.domain.models.chart import AccountsChart
from chart_of_accounts.infrastructure.logging.logger import get_app_logger


class GetAccountUseCase:
    """Fetch one account from a loaded chart."""

    def __init__(self, chart: AccountsChart, logger=None) -> None:
        """Initialize the use case with its required dependencies."""
        self._chart = chart
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> Account | None:
        """Return a copy of the account, or None when the id is unknown."""
        account = self._chart.get_account_by_id(account_id)
        if account is None:
            self._logger.info(f"No account with id '{account_id}' in chart")
        return account


__all__ = ["GetAccountUseCase"]
