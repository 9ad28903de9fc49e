"""Tests for the GetAccountUseCase and ListAccountsUseCase."""

from unittest.mock import MagicMock

from chart_of_accounts.application.use_cases.get_account import (
    GetAccountUseCase,
)
from chart_of_accounts.application.use_cases.list_accounts import (
    ListAccountsUseCase,
)
from chart_of_accounts.domain.models.accounts import (
    Account,
    AccountDTO,
    AccountType,
    Currency,
)
from chart_of_accounts.domain.models.chart import AccountsChart


def _account(account_id: str, name: str, placeholder: bool = False) -> Account:
    return Account(account_id, name, name, AccountType.ASSET,
                   Currency.US_DOLLAR, placeholder)


def _chart() -> AccountsChart:
    assets = _account("01", "Assets", placeholder=True)
    receivable = _account("01-01", "Receivable")
    cash = _account("01-02", "Cash")
    assets.add_sub_account(receivable)
    assets.add_sub_account(cash)
    chart = AccountsChart()
    chart.add_top_level_account(assets)
    chart.add_top_level_account(_account("02", "Liabilities"))
    return chart


def test_get_account_returns_copy() -> None:
    """The use case should return the looked-up account."""
    account = GetAccountUseCase(_chart(), logger=MagicMock()).execute("01-02")

    assert account is not None
    assert account.name == "Cash"


def test_get_account_matches_ids_with_whitespace_exactly() -> None:
    """Ids are opaque strings, surrounding whitespace included."""
    chart = _chart()
    chart.add_top_level_account(_account(" 03", "Equity"))
    use_case = GetAccountUseCase(chart, logger=MagicMock())

    account = use_case.execute(" 03")

    assert account is not None
    assert account.name == "Equity"
    assert use_case.execute("03") is None


def test_get_account_missing_logs_and_returns_none() -> None:
    """A missing id is logged at info level and yields None."""
    logger = MagicMock()

    result = GetAccountUseCase(_chart(), logger=logger).execute("99")

    assert result is None
    logger.info.assert_called_once()


def test_list_accounts_walks_parents_before_children() -> None:
    """Listing should be depth-first with parent ids and depths."""
    rows = ListAccountsUseCase(_chart()).execute()

    assert [(row.id, row.parent_id, row.depth) for row in rows] == [
        ("01", None, 0),
        ("01-01", "01", 1),
        ("01-02", "01", 1),
        ("02", None, 0),
    ]
    assert rows[0] == AccountDTO(
        id="01",
        name="Assets",
        description="Assets",
        account_type="ASSET",
        currency="USD",
        placeholder=True,
        parent_id=None,
        depth=0,
    )


def test_list_accounts_keeps_duplicate_nodes() -> None:
    """Every node is listed even when ids collide."""
    chart = AccountsChart()
    chart.add_top_level_account(_account("01", "A"))
    chart.add_top_level_account(_account("01", "B"))

    rows = ListAccountsUseCase(chart).execute()

    assert [row.name for row in rows] == ["A", "B"]
