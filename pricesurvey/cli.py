"""Command line entry point to reshape a survey export."""
import argparse
import sys
from pathlib import Path

from pricesurvey.core.errors import PriceSurveyError
from pricesurvey.core.logging import configure_logging
from pricesurvey.core.utils import get_config_value, load_env_file
from pricesurvey.processing.pipeline import run_pipeline

DEFAULT_OUTPUT = "output/normalized_prices.csv"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(
        description="Reshape a wide commodity price survey export into one row per item"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Survey export to read (.csv or .xlsx, first sheet only)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(get_config_value("PRICESURVEY_OUTPUT", DEFAULT_OUTPUT)),
        help="CSV file to write normalized rows to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "excel"],
        default="csv",
        help="Also write an Excel workbook when set to 'excel'",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Excel file to write when --sink=excel (defaults next to --output)",
    )
    parser.add_argument(
        "--item",
        action="append",
        dest="items",
        metavar="NAME",
        help="Only keep this item (repeatable), e.g. --item Rice",
    )
    parser.add_argument(
        "--deduplicate",
        action="store_true",
        default=None,
        help="Collapse repeated (submission, item, values) rows before resolving",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the pipeline from the command line."""

    load_env_file()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        output_path = run_pipeline(
            args.input,
            args.output,
            sink=args.sink,
            excel_path=args.excel_output,
            items=args.items,
            deduplicate=args.deduplicate,
        )
    except (PriceSurveyError, FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(f"Wrote {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
