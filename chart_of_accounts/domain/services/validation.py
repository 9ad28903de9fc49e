"""Domain validation helpers."""

from collections import Counter
from logging import Logger

from chart_of_accounts.domain.constants import DuplicateIdPolicy
from chart_of_accounts.domain.exceptions import DuplicateAccountIdError
from chart_of_accounts.domain.models.chart import AccountsChart


def find_duplicate_account_ids(chart: AccountsChart) -> set[str]:
    """Return ids carried by more than one account in the chart.

    Args:
        chart: Chart to inspect.

    Returns:
        set[str]: Ids that the chart index silently collapses.
    """
    counts: Counter[str] = Counter()
    for root in chart.top_level_accounts:
        counts[root.id] += 1
        counts.update(account.id for account in root.flatten_sub_tree())
    return {account_id for account_id, count in counts.items() if count > 1}


def validate_unique_account_ids(
    chart: AccountsChart,
    policy: DuplicateIdPolicy,
    logger: Logger,
) -> None:
    """Apply the duplicate-id policy to a chart.

    Args:
        chart: Chart to validate.
        policy: IGNORE does nothing, WARN logs, ERROR raises.
        logger: Logger used for warnings.

    Raises:
        DuplicateAccountIdError: If the policy is ERROR and ids collide.
    """
    if policy == DuplicateIdPolicy.IGNORE:
        return
    duplicates = find_duplicate_account_ids(chart)
    if not duplicates:
        return
    if policy == DuplicateIdPolicy.ERROR:
        raise DuplicateAccountIdError(duplicates)
    logger.warning(
        f"Chart has duplicate account ids, later accounts win lookups: "
        f"{', '.join(sorted(duplicates))}"
    )


__all__ = ["find_duplicate_account_ids", "validate_unique_account_ids"]
