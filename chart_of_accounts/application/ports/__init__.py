"""Application ports package."""

from .chart_document_source import ChartDocumentSourcePort
from .database import DatabaseEnginePort

__all__ = ["ChartDocumentSourcePort", "DatabaseEnginePort"]
