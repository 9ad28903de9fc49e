"""Tests for the Account tree node."""

from chart_of_accounts.domain.models.accounts import (
    Account,
    AccountDTO,
    AccountType,
    Currency,
)


def _account(account_id: str, name: str = "Account") -> Account:
    return Account(
        id=account_id,
        name=name,
        description=f"{name} description",
        account_type=AccountType.ASSET,
        currency=Currency.US_DOLLAR,
        placeholder=False,
    )


def test_construct_exposes_values_and_no_children() -> None:
    """Accessors should return exactly the constructed values."""
    account = Account(
        id="01",
        name="Accounts Receivable",
        description="Accounts Receivable",
        account_type=AccountType.ASSET,
        currency=Currency.US_DOLLAR,
        placeholder=True,
    )

    assert account.id == "01"
    assert account.name == "Accounts Receivable"
    assert account.description == "Accounts Receivable"
    assert account.account_type is AccountType.ASSET
    assert account.currency is Currency.US_DOLLAR
    assert account.is_placeholder is True
    assert account.sub_accounts == ()


def test_construct_accepts_empty_strings() -> None:
    """No validation is applied to constructor arguments."""
    account = Account("", "", "", AccountType.OTHER, Currency.UNKNOWN, False)

    assert account.id == ""
    assert account.is_placeholder is False


def test_add_sub_account_preserves_order() -> None:
    """Children should be kept in insertion order."""
    parent = _account("01")
    first = _account("01-01")
    second = _account("01-02")

    parent.add_sub_account(first)
    parent.add_sub_account(second)

    assert parent.sub_accounts == (first, second)


def test_sub_accounts_returns_snapshot() -> None:
    """Mutating the returned children must not touch the tree."""
    parent = _account("01")
    parent.add_sub_account(_account("01-01"))

    snapshot = parent.sub_accounts
    parent.add_sub_account(_account("01-02"))

    assert len(snapshot) == 1
    assert len(parent.sub_accounts) == 2


def test_sub_accounts_are_detached_copies() -> None:
    """Growing a returned child must leave the owned subtree unchanged."""
    parent = _account("01")
    parent.add_sub_account(_account("01-01"))

    parent.sub_accounts[0].add_sub_account(_account("INJECTED"))

    assert parent.sub_accounts[0].sub_accounts == ()
    assert [acc.id for acc in parent.flatten_sub_tree()] == ["01-01"]


def test_flatten_without_children_is_empty() -> None:
    """A leaf has no descendants."""
    assert _account("01").flatten_sub_tree() == []


def test_flatten_with_single_child() -> None:
    """A single grandchild-free child is the whole flattened tree."""
    parent = _account("01")
    child = _account("01-01")
    parent.add_sub_account(child)

    assert parent.flatten_sub_tree() == [child]


def test_flatten_emits_descendants_before_each_child() -> None:
    """Flatten should be post-order per child, siblings left to right."""
    root = _account("r")
    left = _account("a")
    left_leaf_1 = _account("a1")
    left_leaf_2 = _account("a2")
    right = _account("b")
    right_leaf = _account("b1")
    left.add_sub_account(left_leaf_1)
    left.add_sub_account(left_leaf_2)
    right.add_sub_account(right_leaf)
    root.add_sub_account(left)
    root.add_sub_account(right)

    ids = [account.id for account in root.flatten_sub_tree()]

    assert ids == ["a1", "a2", "a", "b1", "b"]


def test_account_type_integer_codes() -> None:
    """Account type integer codes are part of the contract."""
    assert int(AccountType.ASSET) == 1
    assert int(AccountType.LIABILITY) == 5
    assert int(AccountType.OTHER) == 6


def test_dto_from_account_uses_names_and_position() -> None:
    """AccountDTO should flatten enums to strings and keep tree position."""
    account = _account("01-01", "Receivable")

    dto = AccountDTO.from_account(account, parent_id="01", depth=1)

    assert dto == AccountDTO(
        id="01-01",
        name="Receivable",
        description="Receivable description",
        account_type="ASSET",
        currency="USD",
        placeholder=False,
        parent_id="01",
        depth=1,
    )
