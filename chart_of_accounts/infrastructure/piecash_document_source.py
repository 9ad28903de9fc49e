"""Chart document source reading a GnuCash book via piecash."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from chart_of_accounts.application.ports.chart_document_source import (
    ChartDocumentSourcePort,
)
from chart_of_accounts.domain.models.gnucash_rows import GnuCashAccountRow
from chart_of_accounts.domain.services.document_builder import (
    build_chart_document,
)
from chart_of_accounts.infrastructure.logging.logger import get_app_logger
from chart_of_accounts.infrastructure.piecash_compat import (
    load_piecash,
    open_piecash_book,
)


def _account_type_name(account) -> str:
    account_type = getattr(account, "type", "")
    if hasattr(account_type, "name"):
        account_type = account_type.name
    return str(account_type).upper()


class PieCashChartDocumentSource(ChartDocumentSourcePort):
    """Chart document built from the accounts of a piecash book."""

    def __init__(self, book_path: Path | str, logger=None) -> None:
        """Initialize the source adapter.

        Args:
            book_path: Path or URI to the piecash book.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            RuntimeError: If piecash is not installed.
        """
        try:
            self._piecash = load_piecash()
        except ImportError as exc:
            raise RuntimeError(
                "piecash is not installed; install it to use the piecash source"
            ) from exc
        self._book_path = book_path
        self._logger = logger or get_app_logger()

    def fetch_rows(self) -> list[GnuCashAccountRow]:
        """Return the flat account rows of the piecash book."""
        book = open_piecash_book(self._piecash, self._book_path)
        try:
            rows = []
            for account in book.accounts:
                commodity = getattr(account, "commodity", None)
                parent = getattr(account, "parent", None)
                rows.append(
                    GnuCashAccountRow(
                        guid=account.guid,
                        name=account.name,
                        description=getattr(account, "description", None),
                        account_type=_account_type_name(account),
                        commodity_mnemonic=(
                            commodity.mnemonic if commodity is not None else None
                        ),
                        placeholder=bool(getattr(account, "placeholder", False)),
                        parent_guid=parent.guid if parent is not None else None,
                    )
                )
        finally:
            close_method = getattr(book, "close", None)
            if callable(close_method):
                close_method()
        self._logger.debug(
            f"Read {len(rows)} accounts from piecash book {self._book_path}"
        )
        return rows

    def fetch_document(self) -> Mapping[str, Any]:
        """Return the nested chart document of the piecash book."""
        return build_chart_document(self.fetch_rows())


__all__ = ["PieCashChartDocumentSource"]
