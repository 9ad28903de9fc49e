"""Build account trees and charts from nested chart documents.

A chart document is any mapping shaped like::

    {"accounts": [{"name": ..., "id": ..., "description": ...,
                   "currency": ..., "placeholder": ..., "subaccounts": [...]}]}

The parser only relies on mapping-style field access, so it accepts the
output of ``json.loads`` as well as documents assembled in memory.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from chart_of_accounts.domain.constants import (
    ACCOUNTS_FIELD,
    REQUIRED_ACCOUNT_FIELDS,
    SUBACCOUNTS_FIELD,
    AccountTypeMode,
)
from chart_of_accounts.domain.exceptions import (
    ChartDocumentError,
    MissingAccountFieldError,
)
from chart_of_accounts.domain.models.accounts import Account, AccountType
from chart_of_accounts.domain.models.chart import AccountsChart
from chart_of_accounts.domain.services.resolvers import (
    resolve_account_type_value,
    resolve_currency,
)


def parse_account(
    node: Any,
    *,
    account_type_mode: AccountTypeMode = AccountTypeMode.FIXED,
    path: str = "account",
) -> Account:
    """Build an account and its whole subtree from a document node.

    Args:
        node: Mapping describing one account.
        account_type_mode: FIXED assigns ASSET to every account, DOCUMENT
            resolves the node's ``type`` field.
        path: Location of the node, used in error messages.

    Returns:
        Account: The parsed account with its children attached.

    Raises:
        MissingAccountFieldError: If name, id, description or currency is
            missing or not a string, here or in any descendant.
    """
    fields: Mapping[str, Any] = node if isinstance(node, Mapping) else {}

    name, account_id, description, currency = (
        _require_string(fields, field, path)
        for field in REQUIRED_ACCOUNT_FIELDS
    )
    placeholder = fields.get("placeholder")

    if account_type_mode == AccountTypeMode.DOCUMENT:
        account_type = resolve_account_type_value(fields.get("type"))
    else:
        account_type = AccountType.ASSET

    account = Account(
        id=account_id,
        name=name,
        description=description,
        account_type=account_type,
        currency=resolve_currency(currency),
        placeholder=placeholder if isinstance(placeholder, bool) else False,
    )
    for index, child in enumerate(_members(fields.get(SUBACCOUNTS_FIELD))):
        account.add_sub_account(
            parse_account(
                child,
                account_type_mode=account_type_mode,
                path=f"{path}.{SUBACCOUNTS_FIELD}[{index}]",
            )
        )
    return account


def parse_accounts_chart(
    document: Any,
    *,
    account_type_mode: AccountTypeMode = AccountTypeMode.FIXED,
) -> AccountsChart:
    """Build a chart from a document holding an ``accounts`` list.

    Args:
        document: Mapping with an ``accounts`` sequence of account nodes.
        account_type_mode: Passed through to ``parse_account``.

    Returns:
        AccountsChart: Chart whose top-level accounts follow document order.

    Raises:
        ChartDocumentError: If the document is not a mapping.
        MissingAccountFieldError: If any account lacks a required field.
    """
    if not isinstance(document, Mapping):
        raise ChartDocumentError(
            f"Chart document must be a mapping, got {type(document).__name__}"
        )
    chart = AccountsChart()
    for index, node in enumerate(_members(document.get(ACCOUNTS_FIELD))):
        chart.add_top_level_account(
            parse_account(
                node,
                account_type_mode=account_type_mode,
                path=f"{ACCOUNTS_FIELD}[{index}]",
            )
        )
    return chart


def _require_string(fields: Mapping[str, Any], field: str, path: str) -> str:
    value = fields.get(field)
    if not isinstance(value, str):
        raise MissingAccountFieldError(field, path)
    return value


def _members(value: Any) -> Sequence[Any]:
    """Return list members, or nothing for absent or non-list values."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value
    return ()


__all__ = ["parse_account", "parse_accounts_chart"]
