"""Chart document source reading a GnuCash SQL book via SQLAlchemy."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import text

from chart_of_accounts.application.ports.chart_document_source import (
    ChartDocumentSourcePort,
)
from chart_of_accounts.application.ports.database import DatabaseEnginePort
from chart_of_accounts.domain.models.gnucash_rows import GnuCashAccountRow
from chart_of_accounts.domain.services.document_builder import (
    build_chart_document,
)


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT
        a.guid,
        a.name,
        a.description,
        a.account_type,
        a.placeholder,
        a.parent_guid,
        c.mnemonic AS commodity_mnemonic
    FROM accounts AS a
    LEFT JOIN commodities AS c ON c.guid = a.commodity_guid
    """
)


class SqlAlchemyChartDocumentSource(ChartDocumentSourcePort):
    """Chart document built from the GnuCash accounts table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the source adapter.

        Args:
            db_port: Port providing access to the GnuCash engine.
        """
        self._db_port = db_port

    def fetch_rows(self) -> list[GnuCashAccountRow]:
        """Return the flat account rows of the GnuCash book."""
        engine = self._db_port.get_gnucash_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [
            GnuCashAccountRow(
                guid=row.guid,
                name=row.name,
                description=row.description,
                account_type=row.account_type,
                commodity_mnemonic=row.commodity_mnemonic,
                placeholder=bool(row.placeholder),
                parent_guid=row.parent_guid,
            )
            for row in rows
        ]

    def fetch_document(self) -> Mapping[str, Any]:
        """Return the nested chart document of the GnuCash book."""
        return build_chart_document(self.fetch_rows())


__all__ = ["SqlAlchemyChartDocumentSource", "SELECT_ACCOUNTS_SQL"]
