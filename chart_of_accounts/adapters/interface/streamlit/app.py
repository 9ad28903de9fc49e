"""Streamlit chart of accounts explorer entry point."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

import streamlit as st

from chart_of_accounts.application.use_cases.get_account import (
    GetAccountUseCase,
)
from chart_of_accounts.application.use_cases.list_accounts import (
    ListAccountsUseCase,
)
from chart_of_accounts.domain.exceptions import ChartDocumentError
from chart_of_accounts.domain.models.accounts import AccountDTO
from chart_of_accounts.domain.models.chart import AccountsChart
from chart_of_accounts.infrastructure.container import (
    build_load_chart_use_case,
)
from chart_of_accounts.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


def _fetch_chart() -> AccountsChart:
    """Load the chart from the configured document source."""
    return build_load_chart_use_case().execute()


@st.cache_data(show_spinner=False)
def _load_chart() -> AccountsChart:
    """Cached wrapper around _fetch_chart for Streamlit sessions."""
    return _fetch_chart()


def _filter_accounts(
    accounts: Sequence[AccountDTO],
    query: str,
) -> list[AccountDTO]:
    """Keep accounts whose name or id contains the query."""
    needle = query.strip().lower()
    if not needle:
        return list(accounts)
    return [
        acc
        for acc in accounts
        if needle in acc.name.lower() or needle in acc.id.lower()
    ]


def _table_rows(accounts: Sequence[AccountDTO]) -> list[dict]:
    """Shape accounts for st.dataframe with names indented by depth."""
    return [
        {
            "ID": acc.id,
            "Name": f"{'    ' * acc.depth}{acc.name}",
            "Type": acc.account_type,
            "Currency": acc.currency,
            "Placeholder": acc.placeholder,
            "Description": acc.description,
        }
        for acc in accounts
    ]


def build_treemap_figure(accounts: Sequence[AccountDTO]) -> "go.Figure":
    """Build a treemap of the account hierarchy.

    Every account gets the same weight, so tile sizes reflect how many
    accounts live below each node. Tiles are keyed by row position because
    account ids may repeat; ``accounts`` must be in depth-first order.
    """
    import plotly.graph_objects as go

    tile_ids: list[str] = []
    parents: list[str] = []
    ancestors: list[str] = []
    for position, acc in enumerate(accounts):
        del ancestors[acc.depth:]
        tile_ids.append(str(position))
        parents.append(ancestors[-1] if ancestors else "")
        ancestors.append(str(position))

    fig = go.Figure(
        go.Treemap(
            ids=tile_ids,
            labels=[acc.name for acc in accounts],
            parents=parents,
            customdata=[[acc.id, acc.account_type] for acc in accounts],
            hovertemplate=(
                "%{label}<br>%{customdata[0]}<br>%{customdata[1]}"
                "<extra></extra>"
            ),
        )
    )
    fig.update_layout(margin={"t": 10, "l": 10, "r": 10, "b": 10})
    return fig


def _render_lookup(chart: AccountsChart) -> None:
    """Render the lookup-by-id box."""
    st.subheader("Lookup")
    account_id = st.text_input("Account id", placeholder="e.g. 01-0101")
    if not account_id.strip():
        return
    get_usage_logger().info(f"Account lookup: {account_id}")
    account = GetAccountUseCase(chart, logger=get_app_logger()).execute(
        account_id
    )
    if account is None:
        st.info(f"No account with id '{account_id}'.")
        return
    st.json(
        {
            "id": account.id,
            "name": account.name,
            "description": account.description,
            "type": account.account_type.name,
            "currency": account.currency.value,
            "placeholder": account.is_placeholder,
            "sub_accounts": [child.id for child in account.sub_accounts],
        }
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Chart of Accounts", layout="wide")
    st.title("Chart of Accounts")

    try:
        chart = _load_chart()
    except (ChartDocumentError, RuntimeError) as exc:
        st.error(f"Could not load the chart: {exc}")
        return

    accounts = ListAccountsUseCase(chart).execute()
    if not accounts:
        st.warning("The chart has no accounts. Check CHART_SOURCE settings.")
        return
    st.caption(f"{chart.count_accounts()} accounts in chart")

    query = st.text_input("Search by name or id", placeholder="Type to filter")
    filtered = _filter_accounts(accounts, query)
    st.dataframe(
        _table_rows(filtered),
        use_container_width=True,
        hide_index=True,
        height=420,
    )
    _render_lookup(chart)
    st.plotly_chart(build_treemap_figure(accounts), use_container_width=True)


if __name__ == "__main__":  # pragma: no cover
    main()
