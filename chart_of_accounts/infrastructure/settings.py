"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from chart_of_accounts.domain.constants import (
    AccountTypeMode,
    DuplicateIdPolicy,
)
from chart_of_accounts.infrastructure.logging.logger import get_app_logger
from chart_of_accounts.utils.utils import get_project_root

SUPPORTED_SOURCES = ("json", "sqlalchemy", "piecash")


@dataclass(frozen=True)
class ChartSettings:
    """Settings for loading a chart of accounts.

    Attributes:
        source: Document source identifier (json, sqlalchemy, or piecash).
        chart_file: Optional path to the JSON chart document.
        piecash_file: Optional path or URI to the piecash book.
        account_type_mode: How parsed accounts get their type.
        duplicate_ids: Policy applied when account ids collide.
    """

    source: str = "json"
    chart_file: Optional[Path] = None
    piecash_file: Optional[Path | str] = None
    account_type_mode: AccountTypeMode = AccountTypeMode.FIXED
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.WARN

    @classmethod
    def from_env(cls) -> "ChartSettings":
        """Build settings from environment variables.

        Returns:
            ChartSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        source = os.getenv("CHART_SOURCE", "json").strip().lower()
        if source not in SUPPORTED_SOURCES:
            logger.warning(
                f"Unknown CHART_SOURCE '{source}', falling back to json"
            )
            source = "json"

        raw_chart = os.getenv("CHART_FILE")
        if raw_chart:
            chart_file = cls._normalize_path(raw_chart, logger=logger)
        else:
            chart_file = cls._default_chart_file(logger=logger)
        if isinstance(chart_file, str):
            logger.warning(
                f"CHART_FILE must be a local path, ignoring '{chart_file}'"
            )
            chart_file = None

        raw_piecash = os.getenv("PIECASH_FILE")
        piecash_file = (
            cls._normalize_path(raw_piecash, logger=logger)
            if raw_piecash
            else None
        )

        return cls(
            source=source,
            chart_file=chart_file,
            piecash_file=piecash_file,
            account_type_mode=cls._parse_choice(
                "CHART_ACCOUNT_TYPES",
                AccountTypeMode,
                AccountTypeMode.FIXED,
                logger,
            ),
            duplicate_ids=cls._parse_choice(
                "CHART_DUPLICATE_IDS",
                DuplicateIdPolicy,
                DuplicateIdPolicy.WARN,
                logger,
            ),
        )

    @staticmethod
    def _parse_choice(name: str, choices, default, logger):
        """Read an enum-valued variable, falling back to its default.

        Args:
            name: Environment variable name.
            choices: Enum class listing the accepted values.
            default: Member returned when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            The matching enum member.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            return choices(raw.strip().lower())
        except ValueError:
            logger.warning(
                f"Invalid {name} value '{raw}', using '{default.value}'"
            )
            return default

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | str:
        """Normalize a file path or URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | str: Normalized filesystem path or URI string.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file":
            return raw_path
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"File does not exist at {path}")
        return path

    @staticmethod
    def _default_chart_file(logger) -> Path | None:
        """Return a default chart document when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single JSON file is in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set CHART_FILE to choose one."
            )
        return None


__all__ = ["ChartSettings", "SUPPORTED_SOURCES"]
