"""Shared helpers for turning source files into named-field rows."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, List

BOM = "\ufeff"


@dataclass
class SourceTable:
    """Rows read from a survey export, with the header they were keyed by."""

    name: str
    columns: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def clean_header(raw: Any) -> str:
    """Normalize a header cell; exports sometimes leak a BOM into the first name."""

    if raw is None:
        return ""
    return str(raw).replace(BOM, "").strip()


def cell_to_text(value: Any) -> str:
    """Render a spreadsheet cell the way a CSV export of the sheet would."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)
