"""Tests for the SQLAlchemy and piecash chart document sources."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from chart_of_accounts.infrastructure import piecash_document_source
from chart_of_accounts.infrastructure.piecash_document_source import (
    PieCashChartDocumentSource,
)
from chart_of_accounts.infrastructure.sqlalchemy_document_source import (
    SELECT_ACCOUNTS_SQL,
    SqlAlchemyChartDocumentSource,
)


def _build_db_port(rows: list[SimpleNamespace]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value.all.return_value = rows

    db_port = MagicMock()
    db_port.get_gnucash_engine.return_value = engine
    return db_port


def _sql_row(guid, name, account_type, parent_guid, placeholder=0):
    return SimpleNamespace(
        guid=guid,
        name=name,
        description=None,
        account_type=account_type,
        placeholder=placeholder,
        parent_guid=parent_guid,
        commodity_mnemonic="USD",
    )


def test_sqlalchemy_source_builds_nested_document() -> None:
    """Rows from the accounts table are nested under their parents."""
    rows = [
        _sql_row("r", "Root Account", "ROOT", None),
        _sql_row("a", "Assets", "ASSET", "r", placeholder=1),
        _sql_row("b", "Checking", "BANK", "a"),
    ]
    db_port = _build_db_port(rows)

    document = SqlAlchemyChartDocumentSource(db_port).fetch_document()

    assert [node["id"] for node in document["accounts"]] == ["a"]
    assets = document["accounts"][0]
    assert assets["placeholder"] is True
    assert [node["id"] for node in assets["subaccounts"]] == ["b"]
    db_port.get_gnucash_engine.assert_called_once()
    conn = db_port.get_gnucash_engine.return_value.connect.return_value
    conn.__enter__.return_value.execute.assert_called_once_with(
        SELECT_ACCOUNTS_SQL
    )


class _Account:
    def __init__(self, guid, name, account_type, commodity=None, parent=None):
        self.guid = guid
        self.name = name
        self.description = f"{name} account"
        self.type = account_type
        self.commodity = commodity
        self.parent = parent
        self.placeholder = 0


def test_piecash_source_reads_book(monkeypatch, tmp_path) -> None:
    """Adapter should load accounts from the piecash book and close it."""
    close_called = {"value": False}

    class _Book:
        def __init__(self):
            usd = SimpleNamespace(mnemonic="USD")
            root = _Account("r", "Root Account", "ROOT")
            income = _Account("i", "Income", "INCOME", usd, root)
            self.accounts = [
                _Account("s", "Salary", "INCOME", usd, income),
                income,
            ]

        def close(self):
            close_called["value"] = True

    def _open_book(path, readonly=True, open_if_lock=False, do_backup=True):
        assert path == str(tmp_path.resolve())
        assert readonly is True
        assert do_backup is False
        return _Book()

    monkeypatch.setattr(
        piecash_document_source,
        "load_piecash",
        lambda: SimpleNamespace(open_book=_open_book),
    )

    source = PieCashChartDocumentSource(tmp_path, logger=MagicMock())
    document = source.fetch_document()

    assert [node["id"] for node in document["accounts"]] == ["i"]
    income = document["accounts"][0]
    assert income["type"] == "income"
    assert income["description"] == "Income account"
    assert [node["id"] for node in income["subaccounts"]] == ["s"]
    assert close_called["value"] is True


def test_piecash_source_closes_book_on_error(monkeypatch, tmp_path) -> None:
    """The book is closed even when reading accounts fails."""
    book = MagicMock()
    type(book).accounts = property(lambda self: 1 / 0)
    monkeypatch.setattr(
        piecash_document_source,
        "load_piecash",
        lambda: SimpleNamespace(open_book=lambda *args, **kwargs: book),
    )

    source = PieCashChartDocumentSource(tmp_path, logger=MagicMock())

    with pytest.raises(ZeroDivisionError):
        source.fetch_rows()
    book.close.assert_called_once()


def test_piecash_source_requires_piecash(monkeypatch, tmp_path) -> None:
    """A missing piecash install becomes a RuntimeError."""

    def _missing():
        raise ImportError("piecash")

    monkeypatch.setattr(piecash_document_source, "load_piecash", _missing)

    with pytest.raises(RuntimeError):
        PieCashChartDocumentSource(tmp_path, logger=MagicMock())
