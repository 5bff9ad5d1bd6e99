"""Export destinations for normalized price rows."""
from pricesurvey.export.sinks import ensure_output_dir, rows_to_csv_text, write_csv, write_excel
from pricesurvey.export.templates import (
    OUTPUT_HEADERS,
    format_price,
    record_to_output_row,
    records_to_output_rows,
)

__all__ = [
    "OUTPUT_HEADERS",
    "ensure_output_dir",
    "format_price",
    "record_to_output_row",
    "records_to_output_rows",
    "rows_to_csv_text",
    "write_csv",
    "write_excel",
]
