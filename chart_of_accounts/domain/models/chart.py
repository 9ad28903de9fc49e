"""Chart of accounts aggregate."""

from __future__ import annotations

from copy import deepcopy

from .accounts import Account


class AccountsChart:
    """Forest of top-level accounts answering id-based queries.

    The id index is derived from the owned trees on every query and is
    never cached, so it always reflects accounts added so far.
    """

    def __init__(self) -> None:
        """Initialize an empty chart."""
        self._top_level_accounts: list[Account] = []

    @property
    def top_level_accounts(self) -> tuple[Account, ...]:
        """Return independent copies of the top-level accounts in order."""
        return tuple(deepcopy(self._top_level_accounts))

    def add_top_level_account(self, account: Account) -> None:
        """Append a root account to the chart."""
        self._top_level_accounts.append(account)

    def count_accounts(self) -> int:
        """Return the number of distinct account ids in the chart."""
        return len(self._build_account_map())

    def get_account_by_id(self, account_id: str) -> Account | None:
        """Return a copy of the account with the given id.

        Args:
            account_id: Identifier to look up.

        Returns:
            Account | None: Independent copy of the account, or None when
            no account carries the id.
        """
        account = self._build_account_map().get(account_id)
        if account is None:
            return None
        return deepcopy(account)

    def get_account_ids(self) -> list[str]:
        """Return every account id in the chart, in no particular order."""
        return list(self._build_account_map())

    def _build_account_map(self) -> dict[str, Account]:
        """Index every reachable account by id.

        Each root is inserted before its descendants, and later entries
        overwrite earlier ones sharing the same id.
        """
        mapping: dict[str, Account] = {}
        for root in self._top_level_accounts:
            mapping[root.id] = root
            for account in root.flatten_sub_tree():
                mapping[account.id] = account
        return mapping


__all__ = ["AccountsChart"]
