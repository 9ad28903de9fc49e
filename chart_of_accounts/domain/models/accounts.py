"""Domain models for the chart of accounts tree."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class AccountType(IntEnum):
    """Classification of an account by its normal balance side."""

    ASSET = 1
    EQUITY = 2
    EXPENSE = 3
    INCOME = 4
    LIABILITY = 5
    OTHER = 6

    @classmethod
    def from_string(cls, value: str) -> "AccountType":
        """Resolve a case-insensitive type name.

        Args:
            value: Raw type name such as "asset" or "LIABILITY".

        Returns:
            AccountType: Matching type, or OTHER when the name is unknown.
        """
        return _ACCOUNT_TYPES_BY_NAME.get(value.lower(), cls.OTHER)


_ACCOUNT_TYPES_BY_NAME = {
    "asset": AccountType.ASSET,
    "equity": AccountType.EQUITY,
    "expense": AccountType.EXPENSE,
    "income": AccountType.INCOME,
    "liability": AccountType.LIABILITY,
}


class Currency(Enum):
    """Denomination of the resources held in an account."""

    US_DOLLAR = "USD"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_string(cls, abbrev: str) -> "Currency":
        """Resolve an exact currency abbreviation, UNKNOWN otherwise."""
        if abbrev == "USD":
            return cls.US_DOLLAR
        return cls.UNKNOWN


@dataclass(frozen=True)
class Account:
    """A node of the account tree.

    Children are owned by their parent and kept in insertion order. The
    only structural mutation is ``add_sub_account``; nothing checks for
    duplicate ids or cycles.

    Attributes:
        id: Identifier, expected to be unique across a chart.
        name: Display name.
        description: Free-form description.
        account_type: Classification of the account.
        currency: Denomination of the account.
        placeholder: True when the account only groups children.
    """

    id: str
    name: str
    description: str
    account_type: AccountType
    currency: Currency
    placeholder: bool
    _sub_accounts: list[Account] = field(
        default_factory=list,
        init=False,
        repr=False,
        hash=False,
    )

    @property
    def is_placeholder(self) -> bool:
        """Return True when the account must not receive transactions."""
        return self.placeholder

    @property
    def sub_accounts(self) -> tuple[Account, ...]:
        """Return independent copies of the direct children."""
        return tuple(deepcopy(self._sub_accounts))

    def add_sub_account(self, account: Account) -> None:
        """Append a child account after the existing ones."""
        self._sub_accounts.append(account)

    def flatten_sub_tree(self) -> list[Account]:
        """Return every strict descendant of this account.

        Each child's own descendants come before the child itself, and
        siblings are visited left to right. The chart index depends on
        this order to decide which account wins an id collision.

        Returns:
            list[Account]: Descendants in post-order per child.
        """
        accounts: list[Account] = []
        for account in self._sub_accounts:
            accounts.extend(account.flatten_sub_tree())
            accounts.append(account)
        return accounts


@dataclass(frozen=True)
class AccountDTO:
    """Serializable representation of an account inside its chart."""

    id: str
    name: str
    description: str
    account_type: str
    currency: str
    placeholder: bool
    parent_id: str | None
    depth: int

    @classmethod
    def from_account(
        cls,
        account: Account,
        parent_id: str | None = None,
        depth: int = 0,
    ) -> "AccountDTO":
        """Build a DTO from a domain account and its tree position."""
        return cls(
            id=account.id,
            name=account.name,
            description=account.description,
            account_type=account.account_type.name,
            currency=account.currency.value,
            placeholder=account.placeholder,
            parent_id=parent_id,
            depth=depth,
        )


__all__ = ["AccountType", "Currency", "Account", "AccountDTO"]
