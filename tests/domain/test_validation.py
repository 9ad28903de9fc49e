"""Tests for chart validation helpers."""

from unittest.mock import MagicMock

import pytest

from chart_of_accounts.domain.constants import DuplicateIdPolicy
from chart_of_accounts.domain.exceptions import DuplicateAccountIdError
from chart_of_accounts.domain.models.accounts import (
    Account,
    AccountType,
    Currency,
)
from chart_of_accounts.domain.models.chart import AccountsChart
from chart_of_accounts.domain.policies.account_filters import (
    is_chart_account_name,
)
from chart_of_accounts.domain.services.validation import (
    find_duplicate_account_ids,
    validate_unique_account_ids,
)


def _account(account_id: str) -> Account:
    return Account(account_id, account_id, "", AccountType.ASSET,
                   Currency.US_DOLLAR, False)


def _chart_with_duplicates() -> AccountsChart:
    first = _account("01")
    first.add_sub_account(_account("02"))
    second = _account("01")
    second.add_sub_account(_account("03"))
    second.add_sub_account(_account("02"))
    chart = AccountsChart()
    chart.add_top_level_account(first)
    chart.add_top_level_account(second)
    return chart


def test_find_duplicate_account_ids() -> None:
    """Ids shared anywhere in the forest are reported."""
    assert find_duplicate_account_ids(_chart_with_duplicates()) == {"01", "02"}


def test_find_duplicate_account_ids_on_unique_chart() -> None:
    """A chart with unique ids has no duplicates."""
    chart = AccountsChart()
    chart.add_top_level_account(_account("01"))

    assert find_duplicate_account_ids(chart) == set()


def test_ignore_policy_is_silent() -> None:
    """IGNORE never logs nor raises."""
    logger = MagicMock()

    validate_unique_account_ids(
        _chart_with_duplicates(),
        DuplicateIdPolicy.IGNORE,
        logger,
    )

    logger.warning.assert_not_called()


def test_warn_policy_logs_once() -> None:
    """WARN logs the duplicated ids."""
    logger = MagicMock()

    validate_unique_account_ids(
        _chart_with_duplicates(),
        DuplicateIdPolicy.WARN,
        logger,
    )

    logger.warning.assert_called_once()
    assert "01, 02" in logger.warning.call_args.args[0]


def test_error_policy_raises() -> None:
    """ERROR raises with the sorted duplicated ids."""
    with pytest.raises(DuplicateAccountIdError) as excinfo:
        validate_unique_account_ids(
            _chart_with_duplicates(),
            DuplicateIdPolicy.ERROR,
            MagicMock(),
        )

    assert excinfo.value.account_ids == ["01", "02"]


def test_chart_account_name_policy() -> None:
    """Blank names and GUID-like names are not chart accounts."""
    assert is_chart_account_name("Checking") is True
    assert is_chart_account_name("  ") is False
    assert is_chart_account_name(None) is False
    assert is_chart_account_name("0123456789ABCDEF0123456789abcdef") is False
    assert is_chart_account_name("0123456789abcdef0123456789abcdeg") is True
