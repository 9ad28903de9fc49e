"""Use case for building a chart of accounts from a document source.

The use case:

* fetches the raw nested document from the configured source port;
* parses it into an AccountsChart, failing on the first invalid account;
* applies the duplicate-id policy before handing the chart out.
"""

from chart_of_accounts.application.ports.chart_document_source import (
    ChartDocumentSourcePort,
)
from chart_of_accounts.domain.constants import (
    AccountTypeMode,
    DuplicateIdPolicy,
)
from chart_of_accounts.domain.models.chart import AccountsChart
from chart_of_accounts.domain.services.document_parser import (
    parse_accounts_chart,
)
from chart_of_accounts.domain.services.validation import (
    validate_unique_account_ids,
)
from chart_of_accounts.infrastructure.logging.logger import get_app_logger


class LoadAccountsChartUseCase:
    """Load a chart of accounts from a document source."""

    def __init__(
        self,
        source: ChartDocumentSourcePort,
        account_type_mode: AccountTypeMode = AccountTypeMode.FIXED,
        duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.WARN,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            source: Port returning the nested chart document.
            account_type_mode: How parsed accounts get their type.
            duplicate_ids: Policy applied when ids collide.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._source = source
        self._account_type_mode = account_type_mode
        self._duplicate_ids = duplicate_ids
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountsChart:
        """Fetch, parse and validate the chart.

        Returns:
            AccountsChart: The loaded chart.

        Raises:
            ChartDocumentError: If the document is malformed, an account
                misses a required field, or ids collide under the ERROR
                policy.
        """
        document = self._source.fetch_document()
        chart = parse_accounts_chart(
            document,
            account_type_mode=self._account_type_mode,
        )
        validate_unique_account_ids(chart, self._duplicate_ids, self._logger)
        self._logger.info(
            f"Loaded chart with {len(chart.top_level_accounts)} top-level "
            f"accounts and {chart.count_accounts()} account ids"
        )
        return chart


__all__ = ["LoadAccountsChartUseCase"]
