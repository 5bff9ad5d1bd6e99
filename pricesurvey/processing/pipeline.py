"""Pipeline orchestration: load a survey export, reshape it, write the result."""
import logging
from pathlib import Path
from typing import Iterable, Optional

from pricesurvey.core.errors import PriceSurveyError
from pricesurvey.core.utils import get_bool_config, load_env_file
from pricesurvey.export.sinks import write_csv, write_excel
from pricesurvey.export.templates import records_to_output_rows
from pricesurvey.ingestion.loader import load_table
from pricesurvey.reshape.categories import select_categories
from pricesurvey.reshape.reshaper import ProgressCallback, reshape

logger = logging.getLogger(__name__)


def run_pipeline(
    input_path: Path,
    output_path: Path,
    sink: str = "csv",
    excel_path: Path | None = None,
    items: Optional[Iterable[str]] = None,
    deduplicate: bool | None = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Path:
    """Load the export, reshape it to one row per item, and write a CSV."""

    load_env_file()
    if deduplicate is None:
        deduplicate = get_bool_config("PRICESURVEY_DEDUPLICATE")

    logger.info("Pipeline starting for %s", input_path)
    table = load_table(input_path)
    if not table.rows:
        message = (
            f"No rows found in {input_path}. "
            "Verify the file is a survey export with a header and at least one submission."
        )
        logger.error(message)
        raise ValueError(message)

    categories = select_categories(items)
    try:
        records = reshape(
            table.rows,
            columns=table.columns,
            categories=categories,
            deduplicate=deduplicate,
            progress_callback=progress_callback,
        )
    except PriceSurveyError as exc:
        logger.error("Could not reshape %s: %s", table.name, exc)
        raise

    if not records:
        logger.warning("No rows in %s resolved to an item with a valid price", table.name)

    rows = records_to_output_rows(records)
    write_csv(rows, output_path)
    logger.info("Wrote CSV output to %s (%d rows)", output_path, len(rows))

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    return output_path
