"""Row models read from GnuCash books."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GnuCashAccountRow:
    """Flat account row as stored in a GnuCash book.

    Attributes:
        guid: GnuCash account identifier.
        name: Account name.
        description: Account description, if any.
        account_type: GnuCash account type (e.g. BANK, ROOT).
        commodity_mnemonic: Mnemonic of the account commodity (e.g. USD).
        placeholder: Whether the account is flagged as placeholder.
        parent_guid: Identifier of the parent account.
    """

    guid: str
    name: str
    description: str | None
    account_type: str
    commodity_mnemonic: str | None
    placeholder: bool
    parent_guid: str | None


__all__ = ["GnuCashAccountRow"]
