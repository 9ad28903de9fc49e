"""Domain policies package."""

from .account_filters import is_chart_account_name

__all__ = ["is_chart_account_name"]
