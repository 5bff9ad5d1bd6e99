"""Table source: read survey exports into rows of named string fields."""
from pricesurvey.ingestion.common import SourceTable
from pricesurvey.ingestion.csv_source import read_csv_table
from pricesurvey.ingestion.excel import read_excel_table
from pricesurvey.ingestion.loader import SUPPORTED_SUFFIXES, load_table

__all__ = [
    "SUPPORTED_SUFFIXES",
    "SourceTable",
    "load_table",
    "read_csv_table",
    "read_excel_table",
]
