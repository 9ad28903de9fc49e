"""Port for acquiring raw chart of accounts documents."""

from collections.abc import Mapping
from typing import Any, Protocol


class ChartDocumentSourcePort(Protocol):
    """Port exposing a nested chart document from some external store."""

    def fetch_document(self) -> Mapping[str, Any]:
        """Return a document holding an ``accounts`` list of account nodes."""


__all__ = ["ChartDocumentSourcePort"]
