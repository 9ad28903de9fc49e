"""Convert flat GnuCash account rows into a nested chart document."""

from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from chart_of_accounts.domain.constants import (
    ACCOUNTS_FIELD,
    GNUCASH_ASSET_TYPES,
    GNUCASH_LIABILITY_TYPES,
    GNUCASH_ROOT_TYPE,
    SUBACCOUNTS_FIELD,
)
from chart_of_accounts.domain.models.gnucash_rows import GnuCashAccountRow
from chart_of_accounts.domain.policies.account_filters import (
    is_chart_account_name,
)


def map_gnucash_account_type(account_type: str | None) -> str:
    """Map a GnuCash account type onto a chart document type name.

    Args:
        account_type: GnuCash type such as BANK or CREDIT.

    Returns:
        str: "asset", "liability", "income", "expense" or "equity" for
        known families, otherwise the raw type unchanged.
    """
    normalized = (account_type or "").strip().upper()
    if normalized in GNUCASH_ASSET_TYPES:
        return "asset"
    if normalized in GNUCASH_LIABILITY_TYPES:
        return "liability"
    if normalized in ("INCOME", "EXPENSE", "EQUITY"):
        return normalized.lower()
    return account_type or ""


def build_chart_document(rows: Iterable[GnuCashAccountRow]) -> dict[str, Any]:
    """Nest GnuCash rows into a chart document.

    ROOT rows are not emitted and their children become top-level
    accounts. Rows failing the account-name policy are dropped along with
    their subtree, and rows whose parent is unknown become top-level.
    Siblings are ordered by name, then guid.

    Args:
        rows: Flat account rows of a single book.

    Returns:
        dict[str, Any]: Document accepted by ``parse_accounts_chart``.
    """
    rows = list(rows)
    known_guids = {row.guid for row in rows}
    children: dict[str | None, list[GnuCashAccountRow]] = defaultdict(list)
    top_level: list[GnuCashAccountRow] = []

    for row in rows:
        if row.account_type == GNUCASH_ROOT_TYPE:
            continue
        if row.parent_guid in known_guids:
            children[row.parent_guid].append(row)
        else:
            top_level.append(row)

    for row in rows:
        if row.account_type == GNUCASH_ROOT_TYPE:
            top_level.extend(children.pop(row.guid, []))

    def _node(row: GnuCashAccountRow) -> dict[str, Any]:
        return {
            "name": row.name,
            "id": row.guid,
            "description": row.description or "",
            "type": map_gnucash_account_type(row.account_type),
            "currency": row.commodity_mnemonic or "",
            "placeholder": bool(row.placeholder),
            SUBACCOUNTS_FIELD: _nodes(children.get(row.guid, [])),
        }

    def _nodes(siblings: list[GnuCashAccountRow]) -> list[dict[str, Any]]:
        return [
            _node(row)
            for row in sorted(siblings, key=lambda item: (item.name, item.guid))
            if is_chart_account_name(row.name)
        ]

    return {ACCOUNTS_FIELD: _nodes(top_level)}


__all__ = ["build_chart_document", "map_gnucash_account_type"]
