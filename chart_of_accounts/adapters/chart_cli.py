"""CLI adapter to inspect a chart of accounts.

This module wires the chart loading use case to the configured document
source and prints the account count, one account, or the whole tree.
"""

import argparse
from pathlib import Path

from chart_of_accounts.application.use_cases.get_account import (
    GetAccountUseCase,
)
from chart_of_accounts.application.use_cases.list_accounts import (
    ListAccountsUseCase,
)
from chart_of_accounts.domain.exceptions import ChartDocumentError
from chart_of_accounts.infrastructure.container import (
    build_load_chart_use_case,
)
from chart_of_accounts.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chart-of-accounts",
        description="Inspect a chart of accounts.",
    )
    parser.add_argument(
        "account_id",
        nargs="?",
        help="Print the account with this id.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read the chart from this JSON document instead of CHART_SOURCE.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the indented account tree.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Load the chart and print the requested view."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    try:
        chart = build_load_chart_use_case(chart_file=args.file).execute()
    except (ChartDocumentError, RuntimeError) as exc:
        logger.error(str(exc))
        return

    if args.account_id:
        account = GetAccountUseCase(chart, logger=logger).execute(
            args.account_id
        )
        if account is None:
            print(f"Account '{args.account_id}' not found.")
            return
        print(f"id: {account.id}")
        print(f"name: {account.name}")
        print(f"description: {account.description}")
        print(f"type: {account.account_type.name}")
        print(f"currency: {account.currency.value}")
        print(f"placeholder: {account.is_placeholder}")
        print(f"sub-accounts: {len(account.sub_accounts)}")
        return

    if args.tree:
        for row in ListAccountsUseCase(chart).execute():
            marker = " [placeholder]" if row.placeholder else ""
            print(f"{'  ' * row.depth}{row.id}  {row.name}{marker}")
        return

    print(f"Chart holds {chart.count_accounts()} accounts.")
    for account_id in sorted(chart.get_account_ids()):
        print(account_id)


if __name__ == "__main__":  # pragma: no cover
    main()
