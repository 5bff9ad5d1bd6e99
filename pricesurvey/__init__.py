"""Reshape wide commodity price survey exports into one row per item."""
from pricesurvey.core import (
    NormalizedRecord,
    PriceSurveyError,
    SchemaError,
    UnknownItemError,
    UnsupportedSourceError,
    configure_logging,
)
from pricesurvey.export import (
    OUTPUT_HEADERS,
    records_to_output_rows,
    rows_to_csv_text,
    write_csv,
    write_excel,
)
from pricesurvey.ingestion import SourceTable, load_table
from pricesurvey.processing import run_pipeline
from pricesurvey.reshape import (
    ITEM_CATEGORIES,
    ItemCategory,
    parse_price,
    reshape,
    select_categories,
    separate_rows,
)

__all__ = [
    "ITEM_CATEGORIES",
    "OUTPUT_HEADERS",
    "ItemCategory",
    "NormalizedRecord",
    "PriceSurveyError",
    "SchemaError",
    "SourceTable",
    "UnknownItemError",
    "UnsupportedSourceError",
    "configure_logging",
    "load_table",
    "parse_price",
    "records_to_output_rows",
    "reshape",
    "rows_to_csv_text",
    "run_pipeline",
    "select_categories",
    "separate_rows",
    "write_csv",
    "write_excel",
]
