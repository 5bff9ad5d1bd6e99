"""Sinks that serialize normalized price rows."""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook

from pricesurvey.export.templates import OUTPUT_HEADERS

EXCEL_SHEET_TITLE = "normalized_prices"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def _write_rows(handle, rows: Iterable[Dict[str, Any]]) -> None:
    writer = csv.DictWriter(handle, fieldnames=OUTPUT_HEADERS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)


def rows_to_csv_text(rows: Iterable[Dict[str, Any]]) -> str:
    """Serialize rows as CSV text, ready to hand to a download."""

    buffer = io.StringIO(newline="")
    _write_rows(buffer, rows)
    return buffer.getvalue()


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write output rows to a CSV file; the header is written even with no rows."""

    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        _write_rows(csvfile, rows)


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write output rows to an Excel workbook using openpyxl."""

    rows = list(rows)
    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = EXCEL_SHEET_TITLE
    sheet.append(OUTPUT_HEADERS)
    for row in rows:
        sheet.append([row.get(header, "") for header in OUTPUT_HEADERS])
    workbook.save(output_path)
