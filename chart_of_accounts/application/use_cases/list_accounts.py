"""Use case to read the full accounts tree for presentation layers."""

from chart_of_accounts.domain.models.accounts import Account, AccountDTO
from chart_of_accounts.domain.models.chart import AccountsChart


class ListAccountsUseCase:
    """Flatten a chart into display rows, parents before children."""

    def __init__(self, chart: AccountsChart) -> None:
        """Initialize the use case with its required dependencies."""
        self._chart = chart

    def execute(self) -> list[AccountDTO]:
        """Return every account node of the chart in depth-first order.

        Unlike id lookups, the listing keeps every node, including accounts
        whose id is shared with another node.
        """
        rows: list[AccountDTO] = []
        for root in self._chart.top_level_accounts:
            self._collect(root, None, 0, rows)
        return rows

    def _collect(
        self,
        account: Account,
        parent_id: str | None,
        depth: int,
        rows: list[AccountDTO],
    ) -> None:
        rows.append(AccountDTO.from_account(account, parent_id, depth))
        for child in account.sub_accounts:
            self._collect(child, account.id, depth + 1, rows)


__all__ = ["ListAccountsUseCase"]
