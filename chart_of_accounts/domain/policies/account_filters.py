"""Account name policies for GnuCash-sourced charts."""

from string import hexdigits

_GUID_LENGTH = 32


def is_chart_account_name(name: str | None) -> bool:
    """Return True when an account belongs in a chart of accounts.

    GnuCash names scheduled-transaction template accounts after their
    GUID, so a bare 32-character hex name marks an internal account.

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True when the account should be kept.
    """
    candidate = (name or "").strip()
    if not candidate:
        return False
    is_guid = len(candidate) == _GUID_LENGTH and all(
        char in hexdigits for char in candidate
    )
    return not is_guid


__all__ = ["is_chart_account_name"]
