"""Domain errors raised while building a chart of accounts."""

from collections.abc import Iterable


class ChartDocumentError(ValueError):
    """Raised when a chart document cannot be turned into a chart."""


class MissingAccountFieldError(ChartDocumentError):
    """Raised when a required account field is absent or not a string.

    Attributes:
        field: Name of the offending field.
        path: Location of the account node inside the document.
    """

    def __init__(self, field: str, path: str) -> None:
        self.field = field
        self.path = path
        super().__init__(
            f"Account at {path} is missing required string field '{field}'"
        )


class DuplicateAccountIdError(ChartDocumentError):
    """Raised when the strict duplicate-id policy finds shared ids."""

    def __init__(self, account_ids: Iterable[str]) -> None:
        self.account_ids = sorted(account_ids)
        super().__init__(
            "Duplicate account ids in chart: " + ", ".join(self.account_ids)
        )


__all__ = [
    "ChartDocumentError",
    "MissingAccountFieldError",
    "DuplicateAccountIdError",
]
