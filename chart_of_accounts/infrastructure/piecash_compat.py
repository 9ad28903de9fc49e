"""Helpers for importing piecash and opening GnuCash books."""

from __future__ import annotations

import inspect
import warnings
from pathlib import Path
from urllib.parse import urlparse

from sqlalchemy.exc import SAWarning

_PIECASH = None


def _patch_sqlalchemy_for_piecash() -> None:
    """Drop the ``constructor`` argument newer SQLAlchemy rejects."""
    try:
        from sqlalchemy.orm import decl_api
    except ImportError:
        return

    original = decl_api.registry.generate_base
    if "constructor" in inspect.signature(original).parameters:
        return
    if getattr(original, "_piecash_patched", False):
        return

    def _generate_base(self, *args, **kwargs):
        kwargs.pop("constructor", None)
        return original(self, *args, **kwargs)

    _generate_base._piecash_patched = True  # type: ignore[attr-defined]
    decl_api.registry.generate_base = _generate_base


def load_piecash():
    """Import piecash once, with compatibility patches applied.

    Raises:
        ImportError: If piecash is not installed.
    """
    global _PIECASH
    if _PIECASH is None:
        _patch_sqlalchemy_for_piecash()
        warnings.filterwarnings("ignore", category=SAWarning)
        import piecash

        _PIECASH = piecash
    return _PIECASH


def open_piecash_book(piecash, book_path: Path | str):
    """Open a GnuCash book read-only from a filesystem path or URI.

    Args:
        piecash: The imported piecash module.
        book_path: Local path, ``file://`` URI or database URI.

    Returns:
        The opened piecash book; callers must close it.
    """
    if not isinstance(book_path, Path):
        parsed = urlparse(book_path)
        if parsed.scheme and parsed.scheme != "file":
            return piecash.open_book(
                uri_conn=book_path,
                readonly=True,
                open_if_lock=True,
                do_backup=False,
            )
        book_path = Path(parsed.path if parsed.scheme else book_path)
    return piecash.open_book(
        str(book_path.expanduser().resolve()),
        readonly=True,
        open_if_lock=True,
        do_backup=False,
    )


__all__ = ["load_piecash", "open_piecash_book"]
