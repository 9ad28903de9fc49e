"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from chart_of_accounts.application.ports.chart_document_source import (
    ChartDocumentSourcePort,
)
from chart_of_accounts.application.ports.database import DatabaseEnginePort
from chart_of_accounts.application.use_cases.load_accounts_chart import (
    LoadAccountsChartUseCase,
)
from chart_of_accounts.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from chart_of_accounts.infrastructure.json_document_source import (
    JsonFileChartDocumentSource,
)
from chart_of_accounts.infrastructure.logging.logger import get_app_logger
from chart_of_accounts.infrastructure.piecash_document_source import (
    PieCashChartDocumentSource,
)
from chart_of_accounts.infrastructure.settings import ChartSettings
from chart_of_accounts.infrastructure.sqlalchemy_document_source import (
    SqlAlchemyChartDocumentSource,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_chart_document_source(
    settings: ChartSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> ChartDocumentSourcePort:
    """Return the configured chart document source.

    Raises:
        RuntimeError: If the selected source lacks its file setting.
    """
    resolved = settings or ChartSettings.from_env()
    if resolved.source == "piecash":
        if resolved.piecash_file is None:
            raise RuntimeError("piecash source requires a PIECASH_FILE value.")
        return PieCashChartDocumentSource(
            resolved.piecash_file,
            logger=get_app_logger(),
        )
    if resolved.source == "sqlalchemy":
        return SqlAlchemyChartDocumentSource(db_port or build_database_adapter())
    if resolved.chart_file is None:
        raise RuntimeError("json source requires a CHART_FILE value.")
    return JsonFileChartDocumentSource(resolved.chart_file)


def build_load_chart_use_case(
    settings: ChartSettings | None = None,
    chart_file: Path | None = None,
) -> LoadAccountsChartUseCase:
    """Return the chart loading use case for the configured source.

    Args:
        settings: Settings to use, read from the environment when omitted.
        chart_file: JSON document overriding the configured source.
    """
    resolved = settings or ChartSettings.from_env()
    if chart_file is not None:
        source = JsonFileChartDocumentSource(chart_file)
    else:
        source = build_chart_document_source(resolved)
    return LoadAccountsChartUseCase(
        source,
        account_type_mode=resolved.account_type_mode,
        duplicate_ids=resolved.duplicate_ids,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_chart_document_source",
    "build_load_chart_use_case",
]
