"""Reader for CSV survey exports."""
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from charset_normalizer import from_bytes

from pricesurvey.core.errors import UnsupportedSourceError
from pricesurvey.ingestion.common import SourceTable, clean_header

logger = logging.getLogger(__name__)


def decode_export(raw: bytes, name: str) -> str:
    """Decode export bytes, trying UTF-8 first and detecting anything else.

    Survey tools usually export UTF-8, but exports re-saved in a desktop
    spreadsheet often come back in a legacy code page such as cp1252.
    """

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise UnsupportedSourceError(f"Cannot detect the text encoding of {name}; save it as UTF-8 CSV")

    logger.info("%s is not UTF-8, decoding as %s", name, match.encoding)
    try:
        return raw.decode(match.encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise UnsupportedSourceError(
            f"Cannot decode {name} as {match.encoding}; save it as UTF-8 CSV"
        ) from exc


def read_csv_table(path: Path) -> SourceTable:
    """Read a comma-separated export into a ``SourceTable``.

    Short rows are padded with empty strings; a UTF-8 BOM is tolerated and
    non-UTF-8 files are decoded with the detected encoding.
    """

    text = decode_export(path.read_bytes(), path.name)
    reader = csv.reader(io.StringIO(text, newline=""))
    header = next(reader, None)
    if header is None:
        logger.warning("CSV file %s is empty", path)
        return SourceTable(name=path.name, columns=[])

    columns = [clean_header(name) for name in header]
    rows = []
    for line_number, values in enumerate(reader, start=2):
        if not any(value.strip() for value in values):
            continue
        if len(values) > len(columns):
            logger.debug("Line %d of %s has %d extra cell(s)", line_number, path, len(values) - len(columns))
        padded = values + [""] * (len(columns) - len(values))
        rows.append(dict(zip(columns, padded)))

    logger.info("Read %d rows from %s", len(rows), path)
    return SourceTable(name=path.name, columns=columns, rows=rows)
