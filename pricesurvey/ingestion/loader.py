"""Pick the right reader for a survey export based on its file type."""
from __future__ import annotations

import logging
from pathlib import Path

from pricesurvey.core.errors import UnsupportedSourceError
from pricesurvey.ingestion.common import SourceTable
from pricesurvey.ingestion.csv_source import read_csv_table
from pricesurvey.ingestion.excel import read_excel_table

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx")


def load_table(path: Path) -> SourceTable:
    """Load a CSV or Excel export from disk."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedSourceError(
            f"Unsupported file type {suffix or '(none)'} for {path.name}; expected one of "
            + ", ".join(SUPPORTED_SUFFIXES)
        )
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info("Loading survey export %s", path)
    if suffix == ".xlsx":
        return read_excel_table(path)
    return read_csv_table(path)
