"""Database ports for reading GnuCash books.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of a GnuCash SQL book."""

    def get_gnucash_engine(self) -> Engine:
        """Get the engine for the GnuCash database.

        Returns:
            Engine: SQLAlchemy engine connected to the GnuCash backend.
        """


__all__ = ["DatabaseEnginePort"]
