"""Reader for ``.xlsx`` survey exports; only the first sheet is used."""
from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import load_workbook

from pricesurvey.core.errors import UnsupportedSourceError
from pricesurvey.ingestion.common import SourceTable, cell_to_text, clean_header

logger = logging.getLogger(__name__)


def read_excel_table(path: Path) -> SourceTable:
    """Read the first worksheet of a workbook into a ``SourceTable``."""

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except Exception as exc:
        raise UnsupportedSourceError(
            f"Cannot read Excel file {path.name} (is it corrupted or not really .xlsx?): {exc}"
        ) from exc

    try:
        sheet = workbook.worksheets[0]
        logger.debug("Reading sheet %r from %s", sheet.title, path)
        values = sheet.iter_rows(values_only=True)
        header = next(values, None)
        if header is None:
            logger.warning("First sheet of %s is empty", path)
            return SourceTable(name=path.name, columns=[])

        columns = [clean_header(cell) for cell in header]
        rows = []
        for raw in values:
            cells = [cell_to_text(cell) for cell in raw]
            if not any(cell.strip() for cell in cells):
                continue
            cells += [""] * (len(columns) - len(cells))
            rows.append(dict(zip(columns, cells)))
    finally:
        workbook.close()

    logger.info("Read %d rows from sheet %r of %s", len(rows), sheet.title, path)
    return SourceTable(name=path.name, columns=columns, rows=rows)
