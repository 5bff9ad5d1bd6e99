"""Pytest configuration and shared survey fixtures."""
import csv
import sys
from pathlib import Path
from typing import Dict, List

import pytest
from openpyxl import Workbook

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pricesurvey.cli import main as cli_main
from pricesurvey.core.models import REQUIRED_COLUMNS
from pricesurvey.reshape.categories import ITEM_CATEGORIES, category_columns

HEADER: List[str] = list(REQUIRED_COLUMNS) + category_columns(ITEM_CATEGORIES) + ["Enumerator Notes"]

# (Submission ID, item, code, price) in the order the sample export must come out.
EXPECTED_SAMPLE_OUTPUT = [
    ("1", "Rice", 1, 50.0),
    ("1", "Green Chilli", 12, 120.5),
    ("2", "Rice", 1, 52.0),
    ("2", "Eggs", 7, 145.0),
    ("10", "Onion", 11, 80.0),
]


def build_row(**values: str) -> Dict[str, str]:
    """Return a full export row with every header column, blank unless given."""

    row = {column: "" for column in HEADER}
    row.update(values)
    return row


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests independent of a developer's .env and shell settings."""

    monkeypatch.setenv("PRICESURVEY_ENV_FILE", str(tmp_path / "missing.env"))
    for name in ("PRICESURVEY_DEDUPLICATE", "PRICESURVEY_OUTPUT", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def sample_rows() -> List[Dict[str, str]]:
    """A small export covering matched, unmatched, NA and empty selections."""

    return [
        build_row(
            **{
                "Submission ID": "2",
                "UserId": "u-2",
                "Submission time": "2024-03-02 10:00:00",
                "DistrictName": "Dhaka",
                "UpazilaName": "Savar",
                "Items to Choose": "Rice, Eggs, Banana",
                "Value - Rice": "52",
                "Rice Purchase Options": "Loose",
                "Type of Shop for Rice": "Retail",
                "Value - Eggs": "145",
                "Eggs Purchase Options": "Dozen",
                "Enumerator Notes": "market day",
            }
        ),
        build_row(
            **{
                "Submission ID": "10",
                "UserId": "u-10",
                "Submission time": "2024-03-05 09:15:00",
                "DistrictName": "Khulna",
                "UpazilaName": "Dumuria",
                "Items to Choose": "Flour, Onion",
                "Value - Flour": "NA",
                "Value - Onion": "80",
                "Type of Shop for Onion": "Market",
            }
        ),
        build_row(
            **{
                "Submission ID": "1",
                "UserId": "u-1",
                "Submission time": "2024-03-01 08:30:00",
                "DistrictName": "Dhaka",
                "UpazilaName": "Keraniganj",
                "Items to Choose": "Green Chilli,Rice",
                "Value - Green Chilli": "120.5",
                "Value - Rice": "50",
                "Rice Purchase Options": "Packaged",
            }
        ),
        build_row(
            **{
                "Submission ID": "3",
                "UserId": "u-3",
                "Submission time": "2024-03-03 11:00:00",
                "DistrictName": "Sylhet",
                "UpazilaName": "Beanibazar",
                "Items to Choose": "",
            }
        ),
    ]


def write_survey_csv(path: Path, rows: List[Dict[str, str]], header: List[str] | None = None) -> Path:
    header = header or HEADER
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=header, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def survey_csv(tmp_path: Path, sample_rows: List[Dict[str, str]]) -> Path:
    """Write the sample export to a CSV file."""

    return write_survey_csv(tmp_path / "survey.csv", sample_rows)


@pytest.fixture
def survey_xlsx(tmp_path: Path, sample_rows: List[Dict[str, str]]) -> Path:
    """Write the sample export to the first sheet of a workbook, prices as numbers."""

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Submissions"
    sheet.append(HEADER)
    for row in sample_rows:
        values = []
        for column in HEADER:
            value = row[column]
            if column.startswith("Value - ") and value not in ("", "NA"):
                value = float(value)
            elif column == "Submission ID":
                value = int(value)
            values.append(value if value != "" else None)
        sheet.append(values)

    ignored = workbook.create_sheet("Lookup")
    ignored.append(["Submission ID", "Items to Choose"])
    ignored.append([99, "Rice"])

    path = tmp_path / "survey.xlsx"
    workbook.save(path)
    return path


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> int:
        monkeypatch.setattr(sys, "argv", ["pricesurvey.cli", *args])
        return cli_main()

    return _run
