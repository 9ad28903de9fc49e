"""JSON-backed chart document sources."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from chart_of_accounts.application.ports.chart_document_source import (
    ChartDocumentSourcePort,
)
from chart_of_accounts.domain.exceptions import ChartDocumentError


def _decode(text: str, origin: str) -> Mapping[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ChartDocumentError(
            f"Invalid JSON in {origin}: {exc.msg} "
            f"(line {exc.lineno}, column {exc.colno})"
        ) from exc
    if not isinstance(document, Mapping):
        raise ChartDocumentError(
            f"Chart document in {origin} must be a JSON object"
        )
    return document


class JsonFileChartDocumentSource(ChartDocumentSourcePort):
    """Chart document read from a JSON file."""

    def __init__(self, path: Path | str) -> None:
        """Initialize the source adapter.

        Args:
            path: Filesystem path of the JSON document.
        """
        self._path = Path(path)

    def fetch_document(self) -> Mapping[str, Any]:
        """Read and decode the JSON document.

        Returns:
            Mapping[str, Any]: Decoded chart document.

        Raises:
            ChartDocumentError: If the file is unreadable or not a JSON object.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ChartDocumentError(
                f"Cannot read chart document {self._path}: {exc}"
            ) from exc
        return _decode(text, str(self._path))


class JsonTextChartDocumentSource(ChartDocumentSourcePort):
    """Chart document decoded from an in-memory JSON body."""

    def __init__(self, text: str | bytes) -> None:
        self._text = text.decode("utf-8") if isinstance(text, bytes) else text

    def fetch_document(self) -> Mapping[str, Any]:
        """Decode the JSON body."""
        return _decode(self._text, "JSON body")


__all__ = ["JsonFileChartDocumentSource", "JsonTextChartDocumentSource"]
